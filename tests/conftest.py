"""
Pytest configuration and fixtures for the HTML to PDF sandbox tests.
"""

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from html_pdf_sandbox.configuration import load_settings
from html_pdf_sandbox.main import create_app
from html_pdf_sandbox.models import Diagnostic, DiagnosticLevel
from html_pdf_sandbox.renderer import DocumentRenderer, RenderingError


class FakeRenderer:
    """Stands in for DocumentRenderer so route tests do not depend on WeasyPrint."""

    def __init__(self, diagnostics: Optional[List[Diagnostic]] = None, error: Optional[str] = None):
        self.diagnostics = diagnostics or []
        self.error = error
        self.received: List[str] = []

    def render_bytes(self, html: str) -> bytes:
        self.received.append(html)
        if self.error:
            raise RenderingError(self.error)
        return b"%PDF-1.7 fake\n" + html.encode("utf-8")

    def collect_diagnostics(self, html: str) -> List[Diagnostic]:
        self.received.append(html)
        if self.error:
            raise RenderingError(self.error)
        return list(self.diagnostics)


@pytest.fixture(scope="session")
def settings():
    return load_settings()


@pytest.fixture(scope="session")
def renderer(settings):
    """One real renderer shared by every test, as the server shares it."""
    return DocumentRenderer(settings.renderer)


@pytest.fixture
def client(settings, renderer):
    """Create a test client backed by the real WeasyPrint renderer."""
    return TestClient(create_app(settings, renderer=renderer))


@pytest.fixture
def examples():
    return {
        "hello-world.htm": "<html><body><h1>Hello</h1></body></html>",
        "tables.htm": "<table><tr><td>a & b</td></tr></table>",
    }


@pytest.fixture
def fake_renderer():
    return FakeRenderer(
        diagnostics=[
            Diagnostic(level=DiagnosticLevel.DEBUG, message="debug noise"),
            Diagnostic(level=DiagnosticLevel.INFO, message="Step 1 - Fetching and parsing HTML"),
            Diagnostic(level=DiagnosticLevel.WARNING, message="Ignored `frobnicate: 1px`, unknown property."),
            Diagnostic(level=DiagnosticLevel.SEVERE, message="Failed to load image"),
        ]
    )


@pytest.fixture
def fake_client(settings, fake_renderer, examples):
    """Create a test client whose renderer is a FakeRenderer."""
    return TestClient(create_app(settings, renderer=fake_renderer, examples=examples))
