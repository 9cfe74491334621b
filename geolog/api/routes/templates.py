"""Log templates API endpoints.

- GET /log-templates - List user-facing templates
- GET /log-templates/{item_id} - Get a template by item id
- POST /log-templates/render - Resolve templates in a text
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from geolog.api.dependencies import get_engine
from geolog.api.models import LogTemplateResponse, RenderRequest, RenderResponse
from geolog.templates import TemplateEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/log-templates")


@router.get("", response_model=list[LogTemplateResponse])
def list_log_templates(
    include_signature: bool = Query(True, description="Include the SIGNATURE template"),
    engine: TemplateEngine = Depends(get_engine),
):
    """List user-facing templates in resolution order."""
    return [
        LogTemplateResponse(
            token=info.token,
            label=info.label,
            item_id=info.item_id,
            description=info.description,
        )
        for info in engine.list_templates(include_signature)
    ]


@router.get("/{item_id}", response_model=LogTemplateResponse)
def get_log_template(item_id: int, engine: TemplateEngine = Depends(get_engine)):
    """Get a template by item id (internal templates included)."""
    template = engine.get_template(item_id)
    if template is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found")
    return LogTemplateResponse(
        token=template.token,
        label=template.label,
        item_id=template.item_id,
        description=template.description,
    )


@router.post("/render", response_model=RenderResponse)
def render_log_text(request: RenderRequest, engine: TemplateEngine = Depends(get_engine)):
    """Resolve all templates in the given text.

    Set increment=false to re-render a preview without advancing [NUMBER].
    """
    context = request.to_context()
    if request.increment:
        text = engine.apply_templates(request.text, context)
    else:
        text = engine.apply_templates_no_increment(request.text, context)
    logger.debug("[RENDER] Rendered %d chars (increment=%s)", len(text), request.increment)
    return RenderResponse(text=text)
