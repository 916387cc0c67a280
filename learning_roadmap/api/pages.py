"""
Page routes for the roadmap form UI
"""
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from learning_roadmap.config import settings
from learning_roadmap.core.templates import render_template
from learning_roadmap.exceptions import (
    ConfigurationError,
    GenerationError,
    GenerationInProgressError,
    RoadmapInputError,
)
from learning_roadmap.models import FORM_FIELDS, RoadmapFormUpdate
from learning_roadmap.roadmap_service import RoadmapService, get_roadmap_service

router = APIRouter(tags=["pages"])
logger = logging.getLogger(__name__)

INVALID_FORM_MESSAGE = "입력값을 확인해주세요."


def render_page(
    request: Request,
    service: RoadmapService,
    notice: str | None = None,
    status_code: int = 200,
):
    """Render the single page for the service's current view."""
    state = service.state
    return render_template(
        "index.html",
        {
            "app_name": settings.app_name,
            "state": state,
            "form": state.form,
            "blocks": service.blocks,
            "notice": notice,
        },
        request,
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
async def index_page(request: Request, service: RoadmapService = Depends(get_roadmap_service)):
    """Roadmap form, busy indicator or generated roadmap"""
    response = render_page(request, service)
    # Notifications are shown once
    if service.state.error:
        service.dismiss_error()
    return response


@router.post("/generate", response_class=HTMLResponse)
async def generate_page(request: Request, service: RoadmapService = Depends(get_roadmap_service)):
    """Submit the form and generate a roadmap"""
    submitted = await request.form()

    try:
        changes = RoadmapFormUpdate.model_validate(
            {key: value for key, value in submitted.items() if key in FORM_FIELDS}
        )
    except ValidationError as e:
        logger.warning(f"⚠️  Invalid form submission: {e.error_count()} error(s)")
        return render_page(request, service, notice=INVALID_FORM_MESSAGE, status_code=422)

    try:
        service.update_form(changes)
        await service.generate()
    except GenerationInProgressError as e:
        return render_page(request, service, notice=e.message, status_code=409)
    except RoadmapInputError as e:
        return render_page(request, service, notice=e.message, status_code=400)
    except ConfigurationError:
        response = render_page(request, service, status_code=503)
        service.dismiss_error()
        return response
    except GenerationError:
        response = render_page(request, service, status_code=502)
        service.dismiss_error()
        return response

    return RedirectResponse(url="/", status_code=303)


@router.post("/reset")
async def reset_page(service: RoadmapService = Depends(get_roadmap_service)):
    """Back to the form ("다시 만들기")"""
    service.reset()
    return RedirectResponse(url="/", status_code=303)
