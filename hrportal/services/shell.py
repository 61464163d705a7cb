"""Header and navigation bar shared by every page."""

from __future__ import annotations

from pydantic import BaseModel
from starlette.responses import Response

from hrportal.core.session import SessionState, clear_session

APP_TITLE = "HR Management System"


class NavLink(BaseModel):
    label: str
    href: str


NAV_LINKS: tuple[NavLink, ...] = (
    NavLink(label="Dashboard", href="/dashboard"),
    NavLink(label="Departments", href="/departments"),
    NavLink(label="Employees", href="/employees"),
    NavLink(label="Shifts", href="/shifts"),
)


class ShellView(BaseModel):
    title: str = APP_TITLE
    show_logout: bool = False
    nav_links: list[NavLink] = []


def build_shell(session: SessionState) -> ShellView:
    if not session.is_authenticated:
        return ShellView()
    return ShellView(show_logout=True, nav_links=list(NAV_LINKS))


def logout(response: Response) -> SessionState:
    clear_session(response)
    return SessionState.anonymous()
