"""
Application state for the roadmap form.

State is an immutable record; every change goes through update(), which
returns a new record and leaves the old one untouched.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Literal, Optional, Union

from learning_roadmap.models import RoadmapForm

View = Literal["form", "loading", "result"]


@dataclass(frozen=True)
class AppState:
    """Form values, in-flight flag, last result and pending notification"""
    form: RoadmapForm = field(default_factory=RoadmapForm)
    loading: bool = False
    result: Optional[str] = None
    error: Optional[str] = None

    @property
    def can_generate(self) -> bool:
        return self.form.has_role and not self.loading

    @property
    def view(self) -> View:
        if self.loading:
            return "loading"
        if self.result:
            return "result"
        return "form"


# ============================================
# Events
# ============================================


@dataclass(frozen=True)
class FieldChanged:
    field: str
    value: Any


@dataclass(frozen=True)
class GenerationStarted:
    pass


@dataclass(frozen=True)
class GenerationSucceeded:
    text: str


@dataclass(frozen=True)
class GenerationFailed:
    message: str


@dataclass(frozen=True)
class NotificationRaised:
    """Precondition failure reported before a request starts; the result stays."""
    message: str


@dataclass(frozen=True)
class ResultCleared:
    pass


@dataclass(frozen=True)
class NotificationDismissed:
    pass


Event = Union[
    FieldChanged,
    GenerationStarted,
    GenerationSucceeded,
    GenerationFailed,
    NotificationRaised,
    ResultCleared,
    NotificationDismissed,
]


def update(state: AppState, event: Event) -> AppState:
    """
    Apply an event to the state.

    Args:
        state: Current state (not modified)
        event: What happened

    Returns:
        The next state

    Raises:
        KeyError: FieldChanged names a field the form does not have
        pydantic.ValidationError: FieldChanged carries an invalid value
        TypeError: Unknown event type
    """
    if isinstance(event, FieldChanged):
        if event.field not in RoadmapForm.model_fields:
            raise KeyError(f"Unknown form field: {event.field}")
        data = state.form.model_dump()
        data[event.field] = event.value
        return replace(state, form=RoadmapForm.model_validate(data))

    if isinstance(event, GenerationStarted):
        return replace(state, loading=True, result=None, error=None)

    if isinstance(event, GenerationSucceeded):
        return replace(state, loading=False, result=event.text, error=None)

    if isinstance(event, GenerationFailed):
        return replace(state, loading=False, result=None, error=event.message)

    if isinstance(event, NotificationRaised):
        return replace(state, error=event.message)

    if isinstance(event, ResultCleared):
        return replace(state, result=None)

    if isinstance(event, NotificationDismissed):
        return replace(state, error=None)

    raise TypeError(f"Unknown event: {event!r}")
