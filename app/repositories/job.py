"""Job repository: CRUD over the ``jobs`` table with parameterized SQL."""

from typing import Any, Dict, List, Mapping, Optional, Union
from sqlalchemy.orm import Session

from app.db.client import DatabaseClient
from app.helpers.sql import sql_for_partial_update
from app.repositories.base import BaseRepository
from app.schemas.job import JobCreate, JobUpdate
from app.services.exceptions import NotFoundError

JOB_COLUMNS = "id, title, salary, equity, company_handle"

# Native field names whose column is named differently
JOB_COLUMN_NAMES = {"companyHandle": "company_handle"}


def _to_record(row: Dict[str, Any]) -> Dict[str, Any]:
	# Drivers hand back NUMERIC as Decimal (or float on SQLite)
	if row.get("equity") is not None:
		row["equity"] = str(row["equity"])
	return row


class JobRepository(BaseRepository):
	"""Repository for Job entity operations."""

	def __init__(self, db: Union[Session, DatabaseClient], correlation_id: Optional[str] = None):
		super().__init__(db, correlation_id)

	def create(self, data: Union[JobCreate, Mapping[str, Any]]) -> Dict[str, Any]:
		"""Insert a job and return it, including the generated id.

		data should be {title, salary, equity, company_handle}; salary and
		equity may be omitted.

		Returns {id, title, salary, equity, company_handle}
		"""
		job_in = data if isinstance(data, JobCreate) else JobCreate.model_validate(dict(data))
		rows = self._query(
			"create job",
			f"""INSERT INTO jobs
				(title, salary, equity, company_handle)
				VALUES ($1, $2, $3, $4)
				RETURNING {JOB_COLUMNS}""",
			[job_in.title, job_in.salary, job_in.equity, job_in.company_handle],
		)
		job = _to_record(rows[0])
		self._log_operation("create", id=job["id"], company_handle=job["company_handle"])
		return job

	def find_all(self) -> List[Dict[str, Any]]:
		"""Returns [{id, title, salary, equity, company_handle}, ...]"""
		rows = self._query("find all jobs", f"SELECT {JOB_COLUMNS} FROM jobs")
		self._log_operation("find_all", count=len(rows))
		return [_to_record(row) for row in rows]

	def get(self, job_id: int) -> Dict[str, Any]:
		"""Return the job with ``job_id``.

		Raises:
			NotFoundError: If no job has that id
		"""
		rows = self._query(
			"get job",
			f"""SELECT {JOB_COLUMNS}
				FROM jobs
				WHERE id = $1""",
			[job_id],
		)
		self._log_operation("get", id=job_id, found=bool(rows))
		if not rows:
			raise NotFoundError("job", job_id, correlation_id=self.correlation_id)
		return _to_record(rows[0])

	def update(self, job_id: int, data: Union[JobUpdate, Mapping[str, Any]]) -> Dict[str, Any]:
		"""Partially update a job with ``data``.

		Only the provided fields change. Data can include
		{title, salary, equity, companyHandle}; ``company_handle`` is accepted
		for the last one too.

		Returns {id, title, salary, equity, company_handle}

		Raises:
			BadRequestError: If ``data`` has no fields
			NotFoundError: If no job has that id
		"""
		job_in = data if isinstance(data, JobUpdate) else JobUpdate.model_validate(dict(data))
		set_cols, values = sql_for_partial_update(job_in.to_update_fields(), JOB_COLUMN_NAMES)
		id_idx = f"${len(values) + 1}"

		rows = self._query(
			"update job",
			f"""UPDATE jobs
				SET {set_cols}
				WHERE id = {id_idx}
				RETURNING {JOB_COLUMNS}""",
			[*values, job_id],
		)
		self._log_operation("update", id=job_id, fields=list(job_in.model_fields_set), found=bool(rows))
		if not rows:
			raise NotFoundError("job", job_id, correlation_id=self.correlation_id)
		return _to_record(rows[0])

	def remove(self, job_id: int) -> Dict[str, Any]:
		"""Delete a job and return {id, title} of the deleted row.

		Raises:
			NotFoundError: If no job has that id
		"""
		rows = self._query(
			"remove job",
			"""DELETE FROM jobs
				WHERE id = $1
				RETURNING id, title""",
			[job_id],
		)
		self._log_operation("remove", id=job_id, found=bool(rows))
		if not rows:
			raise NotFoundError("job", job_id, correlation_id=self.correlation_id)
		return rows[0]
