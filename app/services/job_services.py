from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from sqlalchemy.orm import Session

from app.services.base import BaseService
from app.repositories.job import JobRepository
from app.schemas.job import JobCreate, JobUpdate


class JobService(BaseService):
	def __init__(self, job_repo: JobRepository, correlation_id: Optional[str] = None):
		super().__init__(correlation_id)
		self._set_repositories(job_repo=job_repo)

	def create_job(self, data: Union[JobCreate, Mapping[str, Any]], db: Session) -> Dict[str, Any]:
		job = self.run_in_transaction(db, lambda: self.job_repo.create(data))
		self.log_operation("create_job", job_id=job["id"])
		return job

	def list_jobs(self) -> List[Dict[str, Any]]:
		return self.job_repo.find_all()

	def get_job(self, job_id: int) -> Dict[str, Any]:
		return self.job_repo.get(job_id)

	def update_job(self, job_id: int, data: Union[JobUpdate, Mapping[str, Any]], db: Session) -> Dict[str, Any]:
		job = self.run_in_transaction(db, lambda: self.job_repo.update(job_id, data))
		self.log_operation("update_job", job_id=job_id)
		return job

	def delete_job(self, job_id: int, db: Session) -> Dict[str, Any]:
		removed = self.run_in_transaction(db, lambda: self.job_repo.remove(job_id))
		self.log_operation("delete_job", job_id=job_id)
		return removed
