"""
Roadmap Service
Owns the form state and runs one roadmap generation at a time.

Flow:
1. Form fields are updated through state events
2. generate() checks the role and the API key, then enters the busy state
3. The model response is stored and parsed into content blocks
4. Any failure leaves a single notification and returns to the form
"""

import logging
from collections.abc import Callable
from typing import Any

from learning_roadmap.exceptions import (
    GENERATION_FAILED_MESSAGE,
    ConfigurationError,
    GenerationError,
    GenerationInProgressError,
    RoadmapInputError,
)
from learning_roadmap.models import RoadmapForm, RoadmapFormUpdate
from learning_roadmap.prompts import SYSTEM_INSTRUCTION, build_user_prompt
from learning_roadmap.services.gemini_service import GeminiService, get_gemini_service
from learning_roadmap.state import (
    AppState,
    Event,
    FieldChanged,
    GenerationFailed,
    GenerationStarted,
    GenerationSucceeded,
    NotificationDismissed,
    NotificationRaised,
    ResultCleared,
    update,
)
from learning_roadmap.utils.markdown_blocks import ContentBlock, parse_markdown

logger = logging.getLogger(__name__)

# Lazy singleton instance
_roadmap_service_instance = None


def get_roadmap_service() -> "RoadmapService":
    """
    Get or create the singleton RoadmapService (lazy initialization).

    Returns:
        RoadmapService: Singleton instance
    """
    global _roadmap_service_instance

    if _roadmap_service_instance is None:
        _roadmap_service_instance = RoadmapService()
        logger.info("✅ RoadmapService ready")

    return _roadmap_service_instance


class RoadmapService:
    """Stateful shell around the prompt builder, Gemini client and parser."""

    def __init__(self, gemini_factory: Callable[[], GeminiService] = get_gemini_service):
        self._gemini_factory = gemini_factory
        self._state = AppState()

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def form(self) -> RoadmapForm:
        return self._state.form

    @property
    def blocks(self) -> list[ContentBlock]:
        """Content blocks for the current result (empty when there is none)."""
        return parse_markdown(self._state.result or "")

    def dispatch(self, event: Event) -> AppState:
        self._state = update(self._state, event)
        return self._state

    def change_field(self, field: str, value: Any) -> AppState:
        """
        Change one form field.

        Raises:
            GenerationInProgressError: The form is locked while a request is in flight
        """
        if self._state.loading:
            logger.warning(f"⏳ Generation in progress, ignoring change to '{field}'")
            raise GenerationInProgressError()
        return self.dispatch(FieldChanged(field=field, value=value))

    def update_form(self, changes: RoadmapFormUpdate) -> AppState:
        """Apply every field set on a partial form update (all or nothing while busy)."""
        if self._state.loading:
            raise GenerationInProgressError()
        for field, value in changes.model_dump(exclude_unset=True).items():
            if value is None:
                continue
            self.change_field(field, value)
        return self._state

    def reset(self) -> AppState:
        """Drop the current result and show the form again."""
        return self.dispatch(ResultCleared())

    def dismiss_error(self) -> AppState:
        return self.dispatch(NotificationDismissed())

    async def generate(self) -> list[ContentBlock]:
        """
        Generate a roadmap for the current form values.

        Returns:
            Parsed content blocks of the model response

        Raises:
            GenerationInProgressError: A request is already in flight
            RoadmapInputError: Role is blank
            ConfigurationError: API key is missing (no request is sent)
            GenerationError: The model request failed
        """
        # Checked and set before the first await: one request in flight at most
        if self._state.loading:
            logger.warning("⏳ Generation already in progress, rejecting request")
            raise GenerationInProgressError()

        form = self._state.form
        if not form.has_role:
            raise RoadmapInputError()

        try:
            gemini = self._gemini_factory()
        except ConfigurationError as e:
            logger.error(f"❌ Cannot generate roadmap: {e.message}")
            # No request was started, so a result already on screen stays
            self.dispatch(NotificationRaised(message=e.message))
            raise

        self.dispatch(GenerationStarted())
        logger.info(f"🚀 Generating roadmap for role: {form.role}")

        try:
            text = await gemini.generate_response_async(
                user_prompt=build_user_prompt(form),
                system_instruction=SYSTEM_INSTRUCTION,
            )
        except Exception as e:
            logger.error(f"❌ Error generating roadmap: {e}", exc_info=True)
            self.dispatch(GenerationFailed(message=GENERATION_FAILED_MESSAGE))
            if isinstance(e, GenerationError):
                raise
            raise GenerationError() from e

        self.dispatch(GenerationSucceeded(text=text))
        blocks = self.blocks
        logger.info(f"✅ Roadmap generated: {len(text)} chars, {len(blocks)} blocks")
        return blocks
