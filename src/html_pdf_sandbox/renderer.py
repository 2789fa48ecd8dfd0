"""
Shared WeasyPrint configuration and the two render paths used by the routes.

A single ``DocumentRenderer`` is built at startup and shared by every request.
It owns the font configuration (WeasyPrint's font cache), the stylesheets that
register the configured fonts and default text direction, and the PDF options.
Only the HTML string and the output target change from one call to the next.

Diagnostics are WeasyPrint log records. They are captured with a handler on
the ``weasyprint`` logger that keeps only the records emitted by the calling
thread, so concurrent renders never mix their diagnostics.
"""

from __future__ import annotations

import io
import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, BinaryIO, Dict, Iterator, List

from weasyprint import CSS, HTML, default_url_fetcher
from weasyprint.text.fonts import FontConfiguration

from .models import Diagnostic, DiagnosticLevel, FontSource, RendererSettings, TextDirection

logger = logging.getLogger(__name__)

WEASYPRINT_LOGGER = "weasyprint"
FONTS_DIR = Path(__file__).resolve().parent / "fonts"


class RenderingError(RuntimeError):
    """Raised when WeasyPrint fails to turn a document into a PDF."""


class BlockedResourceError(ValueError):
    """Raised for every URL a submitted document tries to load."""


def block_url_fetcher(url: str, *args: Any, **kwargs: Any) -> Dict[str, Any]:
    raise BlockedResourceError(f"External resources are disabled: {url}")


class DiagnosticCollector(logging.Handler):
    """Collects log records emitted by a single thread, in emission order."""

    def __init__(self, thread_id: int) -> None:
        super().__init__(level=logging.NOTSET)
        self.thread_id = thread_id
        self.diagnostics: List[Diagnostic] = []

    def emit(self, record: logging.LogRecord) -> None:
        if record.thread != self.thread_id:
            return
        try:
            message = record.getMessage()
        except Exception:  # noqa: BLE001
            self.handleError(record)
            return
        self.diagnostics.append(
            Diagnostic(level=DiagnosticLevel.from_logging_level(record.levelno), message=message)
        )


@contextmanager
def capture_diagnostics() -> Iterator[DiagnosticCollector]:
    collector = DiagnosticCollector(threading.get_ident())
    source = logging.getLogger(WEASYPRINT_LOGGER)
    source.addHandler(collector)
    try:
        yield collector
    finally:
        source.removeHandler(collector)


def font_face_rule(font: FontSource, root: Path = FONTS_DIR) -> str | None:
    sources = []
    if font.path is not None:
        font_path = (root / Path(font.path).expanduser()).resolve()
        if font_path.is_file():
            sources.append(f'url("{font_path.as_uri()}")')
        else:
            logger.warning(f"Font file for {font.family!r} not found at {font_path}")
    if font.local is not None:
        sources.append(f'local("{font.local}")')
    if not sources:
        logger.warning(f"Skipping font {font.family!r}: no usable source")
        return None
    return f'@font-face {{ font-family: "{font.family}"; src: {", ".join(sources)}; }}'


def direction_rule(direction: TextDirection) -> str:
    # Documents that set dir themselves keep it.
    return f":root:not([dir]) {{ direction: {direction.value}; }}"


class DocumentRenderer:
    """
    Renders HTML strings to PDF with one shared WeasyPrint configuration.

    Thread Safety:
        The renderer is never mutated after construction. Each call builds
        its own WeasyPrint document; the font configuration is shared.

    Attributes:
        settings: The renderer section of the application settings
        font_config: WeasyPrint font configuration reused across renders
        stylesheets: Font registration and default direction, added to every document
        pdf_options: Extra ``write_pdf`` options derived from ``fast_mode``
    """

    def __init__(self, settings: RendererSettings, font_config: FontConfiguration | None = None) -> None:
        self.settings = settings
        self.font_config = font_config or FontConfiguration()
        logging.getLogger(WEASYPRINT_LOGGER).setLevel(settings.diagnostic_level.upper())
        self.stylesheets = self._build_stylesheets()
        self.pdf_options = self._build_options()

    def _build_stylesheets(self) -> List[CSS]:
        rules = [rule for rule in (font_face_rule(font) for font in self.settings.fonts) if rule]
        rules.append(direction_rule(self.settings.text_direction))
        # Font files come from local configuration, so this sheet may fetch them.
        stylesheet = CSS(string="\n".join(rules), font_config=self.font_config, url_fetcher=default_url_fetcher)
        logger.info(f"Registered {len(rules) - 1} font(s) for rendering")
        return [stylesheet]

    def _build_options(self) -> Dict[str, Any]:
        fast = self.settings.fast_mode
        return {
            "optimize_images": not fast,
            "hinting": not fast,
        }

    def render_pdf(self, html: str, target: BinaryIO) -> None:
        """
        Render ``html`` and write the PDF into ``target``.

        Raises:
            RenderingError: If WeasyPrint cannot parse, lay out or serialize the document
        """
        try:
            document = HTML(string=html, url_fetcher=block_url_fetcher)
            document.write_pdf(
                target,
                stylesheets=self.stylesheets,
                font_config=self.font_config,
                **self.pdf_options,
            )
        except Exception as exc:  # noqa: BLE001
            raise RenderingError(f"Rendering failed: {exc}") from exc

    def render_bytes(self, html: str) -> bytes:
        with io.BytesIO() as buffer:
            self.render_pdf(html, buffer)
            return buffer.getvalue()

    def collect_diagnostics(self, html: str) -> List[Diagnostic]:
        """Render ``html`` into a discarded buffer and return every diagnostic it produced."""
        with capture_diagnostics() as collector, io.BytesIO() as sink:
            self.render_pdf(html, sink)
        return collector.diagnostics
