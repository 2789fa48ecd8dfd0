from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from fastapi import APIRouter, Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from fastapi.templating import Jinja2Templates

from . import __version__
from .configuration import load_settings
from .example_store import load_examples
from .models import Settings
from .renderer import DocumentRenderer, RenderingError

logger = logging.getLogger(__name__)

TEMPLATES = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))

PDF_MEDIA_TYPE = "application/pdf"
LOG_LINE_SEPARATOR = "\r\n"

router = APIRouter()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_renderer(request: Request) -> DocumentRenderer:
    return request.app.state.renderer


def get_examples(request: Request) -> Mapping[str, str]:
    return request.app.state.examples


@router.get("/healthz")
def healthcheck(examples: Mapping[str, str] = Depends(get_examples)) -> Dict[str, Any]:
    return {"status": "ok", "examples": len(examples)}


@router.get("/", response_class=HTMLResponse)
def start_page(
    request: Request,
    file: Optional[str] = None,
    settings: Settings = Depends(get_settings),
    examples: Mapping[str, str] = Depends(get_examples),
):
    selected = file if file is not None else settings.examples.default_file
    context = {
        "examples": sorted(examples),
        "example": examples.get(selected),
        "file": selected,
    }
    return TEMPLATES.TemplateResponse(request, "start.html", context)


@router.post("/post-pdf")
def post_pdf(
    html: str = Form(..., alias="upload-area"),
    renderer: DocumentRenderer = Depends(get_renderer),
) -> Response:
    return Response(content=renderer.render_bytes(html), media_type=PDF_MEDIA_TYPE)


@router.post("/post-logs", response_class=PlainTextResponse)
def post_logs(
    html: str = Form(..., alias="upload-area"),
    renderer: DocumentRenderer = Depends(get_renderer),
) -> PlainTextResponse:
    diagnostics = renderer.collect_diagnostics(html)
    body = LOG_LINE_SEPARATOR.join(diag.message for diag in diagnostics if diag.reported)
    return PlainTextResponse(body, headers={"X-Content-Type-Options": "nosniff"})


def rendering_error_handler(request: Request, exc: RenderingError) -> PlainTextResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return PlainTextResponse(str(exc), status_code=500)


def create_app(
    settings: Optional[Settings] = None,
    renderer: Optional[DocumentRenderer] = None,
    examples: Optional[Mapping[str, str]] = None,
) -> FastAPI:
    """
    Build the sandbox application.

    Examples are loaded and the renderer is constructed here, once, before the
    server accepts any connection. Both are shared by every request.

    Args:
        settings: Application settings (default: loaded from config.yaml)
        renderer: Shared renderer (default: built from ``settings.renderer``)
        examples: Example mapping (default: the bundled samples)
    """
    settings = settings or load_settings()
    app = FastAPI(title="HTML to PDF Sandbox", version=__version__)
    app.state.settings = settings
    app.state.examples = dict(examples) if examples is not None else load_examples()
    app.state.renderer = renderer or DocumentRenderer(settings.renderer)
    app.add_exception_handler(RenderingError, rendering_error_handler)
    app.include_router(router)
    return app


app = create_app()
