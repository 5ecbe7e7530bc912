"""
Tests for app/helpers/sql.py - partial update SET clause builder.
"""

import pytest

from app.helpers.sql import sql_for_partial_update
from app.services.exceptions import BadRequestError


class TestSqlForPartialUpdate:
    """Test SET clause and bound value generation."""

    def test_single_field(self):
        result = sql_for_partial_update({"title": "New"}, {})
        assert result.set_cols == '"title"=$1'
        assert result.values == ["New"]

    def test_fields_keep_input_order(self):
        set_cols, values = sql_for_partial_update(
            {"salary": 100, "title": "New", "equity": "0.1"}, {}
        )
        assert set_cols == '"salary"=$1, "title"=$2, "equity"=$3'
        assert values == [100, "New", "0.1"]

    def test_translates_column_names(self):
        set_cols, values = sql_for_partial_update(
            {"title": "New", "companyHandle": "c1"},
            {"companyHandle": "company_handle"},
        )
        assert set_cols == '"title"=$1, "company_handle"=$2'
        assert values == ["New", "c1"]

    def test_untranslated_names_pass_through(self):
        set_cols, _ = sql_for_partial_update(
            {"company_handle": "c1"}, {"companyHandle": "company_handle"}
        )
        assert set_cols == '"company_handle"=$1'

    def test_none_values_are_kept(self):
        set_cols, values = sql_for_partial_update({"salary": None, "equity": None}, {})
        assert set_cols == '"salary"=$1, "equity"=$2'
        assert values == [None, None]

    def test_missing_translation_table(self):
        set_cols, values = sql_for_partial_update({"title": "New"})
        assert set_cols == '"title"=$1'
        assert values == ["New"]

    def test_start_offsets_placeholders(self):
        set_cols, values = sql_for_partial_update({"title": "New", "salary": 5}, {}, start=3)
        assert set_cols == '"title"=$3, "salary"=$4'
        assert values == ["New", 5]

    def test_values_are_not_interpolated(self):
        set_cols, values = sql_for_partial_update({"title": "x'; DROP TABLE jobs;--"}, {})
        assert "DROP" not in set_cols
        assert values == ["x'; DROP TABLE jobs;--"]

    @pytest.mark.parametrize("column_names", [{}, {"companyHandle": "company_handle"}, None])
    def test_empty_data_is_bad_request(self, column_names):
        with pytest.raises(BadRequestError) as exc_info:
            sql_for_partial_update({}, column_names)
        assert exc_info.value.message == "No data"
