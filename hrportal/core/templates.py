from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from hrportal.core.session import SessionState
from hrportal.services.shell import build_shell

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_page(
    request: Request,
    template_name: str,
    session: SessionState,
    context: dict[str, Any] | None = None,
    status_code: int = 200,
) -> HTMLResponse:
    """Render a page inside the shared layout."""
    return templates.TemplateResponse(
        request,
        template_name,
        {"shell": build_shell(session), **(context or {})},
        status_code=status_code,
    )
