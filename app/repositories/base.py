"""Base repository class for raw-SQL repositories."""

import logging
from typing import Any, Dict, List, Optional, Sequence, Union
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.db.client import DatabaseClient


class BaseRepository:
    """Base repository class wrapping an injected database client.

    Provides:
    - A single query entry point with parameterized statements only
    - Structured logging for data operations
    - Failure logging; storage errors are re-raised unmodified
    """

    def __init__(self, db: Union[Session, DatabaseClient], correlation_id: Optional[str] = None):
        """Initialize repository with a database session or client.

        Args:
            db: SQLAlchemy database session, or a DatabaseClient wrapping one
            correlation_id: Optional request correlation ID for logging
        """
        self.client = db if isinstance(db, DatabaseClient) else DatabaseClient(db, correlation_id)
        self.db = self.client.db
        self.correlation_id = correlation_id
        self.logger = logging.getLogger(self.__class__.__name__)

    def _query(self, operation: str, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """Execute one statement on behalf of ``operation``.

        Raises:
            SQLAlchemyError: On database operation failure
        """
        try:
            return self.client.execute(sql, params)
        except SQLAlchemyError as e:
            self.logger.error(
                f"Failed to {operation}",
                extra={
                    "correlation_id": self.correlation_id,
                    "repository": self.__class__.__name__,
                    "error": str(e)
                }
            )
            raise

    def _log_operation(self, operation: str, **kwargs: Any) -> None:
        """Log repository operation with structured fields.

        Args:
            operation: Name of the operation being performed
            **kwargs: Additional fields to include in log
        """
        log_data = {
            "correlation_id": self.correlation_id,
            "repository": self.__class__.__name__,
            "operation": operation,
            **kwargs
        }
        self.logger.info(f"Repository operation: {operation}", extra=log_data)
