"""Glossary export endpoints."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ..models.glossary import Glossary
from ..utils.export import glossary_to_markdown, export_filename

router = APIRouter(prefix="/api/export", tags=["Export"])


@router.post("/markdown", response_class=PlainTextResponse)
async def export_markdown(glossary: Glossary):
    """Render a glossary, with any expanded content, as a Markdown download."""
    return PlainTextResponse(
        glossary_to_markdown(glossary),
        media_type="text/markdown",
        headers={"Content-Disposition": f'attachment; filename="{export_filename(glossary)}"'},
    )
