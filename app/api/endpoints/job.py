from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.api.dependencies.database import get_db
from app.api.dependencies.services import get_job_service
from app.services.job_services import JobService
from app.services.exceptions import ServiceError, get_http_status_for_error
from app.schemas.job import JobCreate, JobUpdate, JobRead, JobDeleted


router = APIRouter(
	responses={
		400: {"description": "Bad Request"},
		404: {"description": "Not Found"},
	},
)


def _raise_http(error: ServiceError) -> None:
	raise HTTPException(status_code=get_http_status_for_error(error).value, detail=error.user_message)


@router.post("", status_code=201, response_model=JobRead)
def create_job(
	job_in: JobCreate,
	db: Session = Depends(get_db),
	job_service: JobService = Depends(get_job_service),
):
	"""
	Create a job posting.
	"""
	return job_service.create_job(job_in, db)


@router.get("", response_model=list[JobRead])
def list_jobs(job_service: JobService = Depends(get_job_service)):
	return job_service.list_jobs()


@router.get("/{job_id}", response_model=JobRead)
def get_job(job_id: int, job_service: JobService = Depends(get_job_service)):
	try:
		return job_service.get_job(job_id)
	except ServiceError as e:
		_raise_http(e)


@router.patch("/{job_id}", response_model=JobRead)
def update_job(
	job_id: int,
	job_in: JobUpdate,
	db: Session = Depends(get_db),
	job_service: JobService = Depends(get_job_service),
):
	"""
	Partially update a job. Fields left out are unchanged; null clears salary or equity.
	"""
	try:
		return job_service.update_job(job_id, job_in, db)
	except ServiceError as e:
		_raise_http(e)


@router.delete("/{job_id}", response_model=JobDeleted)
def delete_job(
	job_id: int,
	db: Session = Depends(get_db),
	job_service: JobService = Depends(get_job_service),
):
	try:
		return {"deleted": job_service.delete_job(job_id, db)}
	except ServiceError as e:
		_raise_http(e)
