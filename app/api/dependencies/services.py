"""Service dependency providers for FastAPI dependency injection."""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from typing import Optional

from app.api.dependencies.database import get_db
from app.services.job_services import JobService
from app.repositories.job import JobRepository


def get_correlation_id(request: Request) -> Optional[str]:
	"""Extract or generate correlation ID for logging and tracing."""
	from app.core.observability import generate_correlation_id
	cid = getattr(request.state, "correlation_id", None)
	if not cid:
		cid = generate_correlation_id(request.headers.get("X-Correlation-ID"))
		setattr(request.state, "correlation_id", cid)
	return cid


def get_job_repository(
    db: Session = Depends(get_db),
    correlation_id: Optional[str] = Depends(get_correlation_id)
) -> JobRepository:
    """Provide JobRepository instance."""
    return JobRepository(db=db, correlation_id=correlation_id)


def get_job_service(
    job_repo: JobRepository = Depends(get_job_repository),
    correlation_id: Optional[str] = Depends(get_correlation_id)
) -> JobService:
    """Provide JobService instance with required repository."""
    return JobService(job_repo=job_repo, correlation_id=correlation_id)
