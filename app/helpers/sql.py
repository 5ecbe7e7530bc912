"""SQL fragment helpers shared by the raw-SQL repositories."""

from typing import Any, List, Mapping, NamedTuple, Optional

from app.services.exceptions import BadRequestError


class PartialUpdate(NamedTuple):
    """``SET`` clause body and the values bound to its placeholders."""
    set_cols: str
    values: List[Any]


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    column_names: Optional[Mapping[str, str]] = None,
    start: int = 1,
) -> PartialUpdate:
    """Build the ``SET`` clause of a partial UPDATE.

    Only the keys present in ``data_to_update`` are written; an explicit
    ``None`` value sets the column to NULL.

    Args:
        data_to_update: Field name -> new value, e.g. ``{"title": "New", "companyHandle": "c1"}``
        column_names: Field name -> column name, for fields whose column is
            named differently, e.g. ``{"companyHandle": "company_handle"}``
        start: Index of the first placeholder

    Returns:
        PartialUpdate with ``set_cols`` like ``"title"=$1, "company_handle"=$2``
        and ``values`` like ``["New", "c1"]``

    Raises:
        BadRequestError: If there is nothing to update
    """
    keys = list(data_to_update.keys())
    if not keys:
        raise BadRequestError("No data")

    column_names = column_names or {}
    cols = [
        f'"{column_names.get(key, key)}"=${idx}'
        for idx, key in enumerate(keys, start=start)
    ]

    return PartialUpdate(
        set_cols=", ".join(cols),
        values=[data_to_update[key] for key in keys],
    )
