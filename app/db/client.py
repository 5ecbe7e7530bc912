"""Thin query client over a SQLAlchemy session.

Repositories write SQL with numbered placeholders (``$1``, ``$2``, ...) and
hand the values over as a sequence. The client rewrites the placeholders to
SQLAlchemy bind parameters so every value is bound by the driver, never
interpolated into the statement text.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import text
from sqlalchemy.orm import Session

_PLACEHOLDER = re.compile(r"\$(\d+)")


def to_bind_params(sql: str, params: Sequence[Any]) -> tuple[str, Dict[str, Any]]:
    """Rewrite ``$N`` placeholders to ``:pN`` and key the values accordingly.

    Raises:
        ValueError: If a placeholder has no matching value
    """
    def _replace(match: re.Match) -> str:
        idx = int(match.group(1))
        if idx < 1 or idx > len(params):
            raise ValueError(f"Placeholder ${idx} has no bound value ({len(params)} given)")
        return f":p{idx}"

    statement = _PLACEHOLDER.sub(_replace, sql)
    bound = {f"p{idx}": value for idx, value in enumerate(params, start=1)}
    return statement, bound


class DatabaseClient:
    """Execute parameterized SQL on an injected session.

    The client never commits; the owner of the session decides the
    transaction boundary.
    """

    def __init__(self, db: Session, correlation_id: Optional[str] = None):
        self.db = db
        self.correlation_id = correlation_id
        self.logger = logging.getLogger(self.__class__.__name__)

    def execute(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """Run one statement and return its rows as plain dicts.

        Args:
            sql: Statement text with ``$N`` placeholders
            params: Values for the placeholders, in order

        Returns:
            Rows as column -> value dicts; empty for statements returning no rows

        Raises:
            SQLAlchemyError: On any driver or database failure, unmodified
        """
        statement, bound = to_bind_params(sql, params)
        self.logger.debug(
            "Executing statement",
            extra={
                "correlation_id": self.correlation_id,
                "statement": " ".join(statement.split()),
                "param_count": len(bound)
            }
        )
        result = self.db.execute(text(statement), bound)
        if not result.returns_rows:
            return []
        return [dict(row) for row in result.mappings().all()]
