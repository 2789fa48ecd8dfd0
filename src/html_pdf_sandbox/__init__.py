"""
HTML to PDF Sandbox - a small web demo around the WeasyPrint renderer.

Paste HTML into a form and get back either the rendered PDF or the list of
diagnostics WeasyPrint reported while rendering it. All layout, text shaping
and PDF generation happen inside WeasyPrint; this package only wires HTTP
requests to it.

Key Components:
    - main: FastAPI application factory and HTTP routes
    - renderer: Shared WeasyPrint configuration and diagnostic capture
    - example_store: Bundled example documents for the picker
    - configuration: OmegaConf config loading and overrides
    - models: Pydantic settings and diagnostic models

Usage:
    Run the server on the configured port (8080 by default) with:
        python -m html_pdf_sandbox

    Or directly through uvicorn:
        uvicorn html_pdf_sandbox.main:app --host 0.0.0.0 --port 8080
"""

__version__ = "0.1.0"
