"""Tests for PaginationSettings and coerce_settings in src/paginator/domain/models/pagination.py"""

import pytest
from pydantic import ValidationError

from paginator.domain.models.pagination import PaginationSettings, coerce_settings


class TestPaginationSettings:
    def test_only_supplied_fields_reported(self):
        settings = PaginationSettings(total_items=10, url_pattern="/x/(:page)/")
        assert settings.supplied() == {"total_items": 10, "url_pattern": "/x/(:page)/"}

    def test_explicit_none_not_reported(self):
        settings = PaginationSettings(total_items=10, sort_pattern=None)
        assert settings.supplied() == {"total_items": 10}

    def test_camel_case_aliases(self):
        settings = PaginationSettings.model_validate(
            {
                "totalItems": 5,
                "itemsPerPage": 2,
                "isItemsPerPageUsed": True,
                "isSortPatternUsed": False,
                "searchPattern": "smith",
            }
        )
        assert settings.total_items == 5
        assert settings.items_per_page == 2
        assert settings.is_items_per_page_used is True
        assert settings.is_sort_pattern_used is False
        assert settings.search_pattern == "smith"

    def test_legacy_total_record_count(self):
        settings = PaginationSettings.model_validate({"totalRecordCount": 1082})
        assert settings.total_items == 1082

    def test_unknown_keys_ignored(self):
        settings = PaginationSettings.model_validate({"total_items": 1, "renderAsJson": "x"})
        assert settings.supplied() == {"total_items": 1}

    @pytest.mark.parametrize(
        "raw, expected",
        [(7.9, 7), ("7", 7), (" 12 ", 12), ("7.9", 7), (3, 3)],
    )
    def test_numbers_truncated(self, raw, expected):
        settings = PaginationSettings.model_validate({"current_page_number": raw})
        assert settings.current_page_number == expected

    def test_garbage_number_rejected(self):
        with pytest.raises(ValidationError):
            PaginationSettings.model_validate({"items_per_page": "many"})

    @pytest.mark.parametrize("raw", ["inf", "-inf", float("inf"), "nan", float("nan")])
    def test_non_finite_number_rejected(self, raw):
        with pytest.raises(ValidationError):
            PaginationSettings.model_validate({"total_items": raw})

    def test_frozen(self):
        settings = PaginationSettings(total_items=1)
        with pytest.raises(ValidationError):
            settings.total_items = 2


class TestCoerceSettings:
    def test_none(self):
        assert coerce_settings().supplied() == {}

    def test_overrides_win(self):
        settings = coerce_settings({"total_items": 1, "items_per_page": 5}, items_per_page=9)
        assert settings.supplied() == {"total_items": 1, "items_per_page": 9}

    def test_model_input(self):
        settings = coerce_settings(PaginationSettings(total_items=3), current_page_number=2)
        assert settings.supplied() == {"total_items": 3, "current_page_number": 2}
