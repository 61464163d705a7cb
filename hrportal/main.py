from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from hrportal.api.pages.router import pages_router
from hrportal.api.v1.router import api_router
from hrportal.core.config import settings
from hrportal.core.logging_config import configure_logging
from hrportal.services.hr_api import hr_api_client

logger = logging.getLogger(__name__)

configure_logging(settings)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    try:
        await hr_api_client.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize HrApiClient, continuing without HR API")
    yield
    await hr_api_client.close()


app = FastAPI(
    title="HR Portal",
    description="HR management web client",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.include_router(api_router)
app.include_router(pages_router)
