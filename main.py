from contextlib import asynccontextmanager

from fastapi import FastAPI

from apis.base import api_router
from core.config import settings
from core.logging_config import configure_logging
from validators.job import ValidationJob


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    app.state.validation_job = ValidationJob(timeout=settings.COMMAND_TIMEOUT_SECONDS)
    app.state.last_outcome = None
    yield
    # a running job finishes before the worker stops
    app.state.validation_job.shutdown(wait=True)


app = FastAPI(title=settings.PROJECT_NAME, version=settings.PROJECT_VERSION, lifespan=lifespan)
app.include_router(api_router)


@app.get("/")
async def read_root():
    return {"name": settings.PROJECT_NAME, "version": settings.PROJECT_VERSION}
