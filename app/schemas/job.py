from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _normalize_equity(v: Any) -> Optional[str]:
	if v is None:
		return None
	text_value = str(v).strip()
	try:
		amount = Decimal(text_value)
	except InvalidOperation:
		raise ValueError("equity must be a decimal number")
	if not amount.is_finite():
		raise ValueError("equity must be a decimal number")
	if amount < 0 or amount > 1:
		raise ValueError("equity must be between 0 and 1")
	return text_value


class JobCreate(BaseModel):
	title: str = Field(min_length=1)
	salary: Optional[int] = Field(default=None, ge=0)
	equity: Optional[str] = None
	company_handle: str = Field(min_length=1, max_length=25)

	model_config = ConfigDict(extra="forbid")

	@field_validator("equity", mode="before")
	@classmethod
	def validate_equity(cls, v: Any) -> Optional[str]:
		return _normalize_equity(v)


class JobUpdate(BaseModel):
	"""Sparse job update; only fields explicitly set are written.

	Setting ``salary`` or ``equity`` to ``None`` clears the column, which is
	different from leaving the field out.
	"""
	title: Optional[str] = Field(default=None, min_length=1)
	salary: Optional[int] = Field(default=None, ge=0)
	equity: Optional[str] = None
	company_handle: Optional[str] = Field(default=None, alias="companyHandle", min_length=1, max_length=25)

	model_config = ConfigDict(extra="forbid", populate_by_name=True)

	@field_validator("title", "company_handle")
	@classmethod
	def reject_null(cls, v: Optional[str]) -> str:
		if v is None:
			raise ValueError("may not be null")
		return v

	@field_validator("equity", mode="before")
	@classmethod
	def validate_equity(cls, v: Any) -> Optional[str]:
		return _normalize_equity(v)

	def to_update_fields(self) -> Dict[str, Any]:
		"""Fields the caller set, keyed by their native (aliased) names."""
		return self.model_dump(exclude_unset=True, by_alias=True)


class JobRead(BaseModel):
	id: int
	title: str
	salary: Optional[int] = None
	equity: Optional[str] = None
	company_handle: str

	model_config = ConfigDict(from_attributes=True)


class JobRemoved(BaseModel):
	id: int
	title: str


class JobDeleted(BaseModel):
	deleted: JobRemoved
