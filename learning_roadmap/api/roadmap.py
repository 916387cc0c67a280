"""
API routes for roadmap generation.
JSON counterpart of the form page: read/update the form, generate, reset,
and render arbitrary Markdown into content blocks.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, ValidationError

from learning_roadmap.exceptions import (
    ConfigurationError,
    GenerationError,
    GenerationInProgressError,
    RoadmapInputError,
)
from learning_roadmap.models import RoadmapForm, RoadmapFormUpdate
from learning_roadmap.roadmap_service import RoadmapService, get_roadmap_service
from learning_roadmap.utils.markdown_blocks import ContentBlock, parse_markdown, render_html

router = APIRouter()
logger = logging.getLogger(__name__)


class RoadmapStateResponse(BaseModel):
    view: str = Field(..., description="'form', 'loading' or 'result'")
    loading: bool
    can_generate: bool
    form: RoadmapForm
    result: str | None = Field(default=None, description="Raw Markdown of the last roadmap")
    error: str | None = Field(default=None, description="Pending user notification")
    blocks: list[ContentBlock] = Field(default=[], description="Parsed result")


class RenderRequest(BaseModel):
    markdown: str = Field(..., description="Markdown text to parse")


class RenderResponse(BaseModel):
    blocks: list[ContentBlock]
    html: str


def _state_response(service: RoadmapService) -> RoadmapStateResponse:
    state = service.state
    return RoadmapStateResponse(
        view=state.view,
        loading=state.loading,
        can_generate=state.can_generate,
        form=state.form,
        result=state.result,
        error=state.error,
        blocks=service.blocks,
    )


@router.get("/state", response_model=RoadmapStateResponse)
async def get_state(service: RoadmapService = Depends(get_roadmap_service)):
    """
    Get the current form values, busy flag and last result.
    """
    return _state_response(service)


@router.patch("/form", response_model=RoadmapStateResponse)
async def update_form(
    changes: RoadmapFormUpdate,
    service: RoadmapService = Depends(get_roadmap_service),
):
    """
    Update one or more form fields.
    """
    try:
        service.update_form(changes)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False)) from e
    except GenerationInProgressError as e:
        raise HTTPException(status_code=409, detail=e.message) from e
    return _state_response(service)


@router.post("/generate")
async def generate_roadmap(
    changes: RoadmapFormUpdate | None = None,
    service: RoadmapService = Depends(get_roadmap_service),
):
    """
    Generate a roadmap from the current form (optionally updating it first).

    Flow:
    1. Apply submitted form fields
    2. Reject if a generation is in flight or the role is blank
    3. Call Gemini once and parse the Markdown response

    Returns:
        Raw Markdown, content blocks and rendered HTML
    """
    try:
        if changes is not None:
            service.update_form(changes)

        blocks = await service.generate()

        return {
            "success": True,
            "markdown": service.state.result,
            "blocks": [block.model_dump() for block in blocks],
            "html": render_html(blocks),
        }

    except HTTPException:
        raise
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False)) from e
    except GenerationInProgressError as e:
        raise HTTPException(status_code=409, detail=e.message) from e
    except RoadmapInputError as e:
        raise HTTPException(status_code=400, detail=e.message) from e
    except ConfigurationError as e:
        service.dismiss_error()
        raise HTTPException(status_code=503, detail=e.message) from e
    except GenerationError as e:
        service.dismiss_error()
        raise HTTPException(status_code=502, detail=e.message) from e
    except Exception as e:
        logger.error(f"Error generating roadmap: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to generate roadmap: {str(e)}") from e


@router.post("/reset", response_model=RoadmapStateResponse)
async def reset_roadmap(service: RoadmapService = Depends(get_roadmap_service)):
    """
    Clear the generated roadmap and return to the form.
    """
    service.reset()
    return _state_response(service)


@router.post("/render", response_model=RenderResponse)
async def render_markdown(render_request: RenderRequest):
    """
    Parse Markdown into content blocks without calling the model.
    """
    blocks = parse_markdown(render_request.markdown)
    return RenderResponse(blocks=blocks, html=render_html(blocks))
