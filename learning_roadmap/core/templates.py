"""
Template rendering utilities
"""
from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from learning_roadmap.models import AISkill, DigitalSkill, ExperienceLevel, ProgrammingSkill

# Templates ship inside the package
TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

# Create FastAPI templates instance
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Select options for the form page
templates.env.globals["options"] = {
    "experience": ExperienceLevel.choices(),
    "skill_digital": DigitalSkill.choices(),
    "skill_programming": ProgrammingSkill.choices(),
    "skill_ai": AISkill.choices(),
}


def render_template(template_name: str, context: dict, request: Request, status_code: int = 200):
    """Render template with context"""
    return templates.TemplateResponse(
        request, template_name, context, status_code=status_code
    )
