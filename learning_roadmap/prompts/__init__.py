"""
Prompt templates for roadmap generation.

- SYSTEM_INSTRUCTION: fixed persona and output format
- USER_PROMPT_TEMPLATE: per-request form values
"""

from learning_roadmap.models import RoadmapForm
from learning_roadmap.prompts.roadmap import (
    COMPANY_PLACEHOLDER,
    CONSTRAINTS_PLACEHOLDER,
    SYSTEM_INSTRUCTION,
    USER_PROMPT_TEMPLATE,
)

__all__ = ["SYSTEM_INSTRUCTION", "USER_PROMPT_TEMPLATE", "build_user_prompt"]


def build_user_prompt(form: RoadmapForm) -> str:
    """Substitute form values into the user prompt template."""
    return USER_PROMPT_TEMPLATE.format(
        company=form.company or COMPANY_PLACEHOLDER,
        role=form.role,
        experience=form.experience.value,
        skill_digital=form.skill_digital.value,
        skill_programming=form.skill_programming.value,
        skill_ai=form.skill_ai.value,
        duration_total=form.duration_total,
        duration_weekly=form.duration_weekly,
        goals=form.goals,
        constraints=form.constraints or CONSTRAINTS_PLACEHOLDER,
    )
