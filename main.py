# main.py
from fastapi import FastAPI
from app.api.endpoints import job
from app.core.observability import RequestLoggingMiddleware, configure_logging
# Import all models to ensure relationships are properly resolved
from app.db import base  # noqa: F401

configure_logging()

app = FastAPI(title="Jobly jobs API")
app.add_middleware(RequestLoggingMiddleware)

app.include_router(job.router, prefix="/jobs", tags=["jobs"])
