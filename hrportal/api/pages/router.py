from fastapi import APIRouter

from hrportal.api.pages import auth, dashboard, employees, shifts

pages_router = APIRouter()
pages_router.include_router(auth.router)
pages_router.include_router(dashboard.router)
pages_router.include_router(employees.router)
pages_router.include_router(shifts.router)
