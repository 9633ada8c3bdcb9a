"""Tests for src/paginator/domain/services/url_builder.py"""

from paginator.domain.services.url_builder import build_page_url

PATTERN = "/staff/search/(:page)/(:rows)/(:search)/(:sort)/"


class TestBuildPageUrl:
    def test_strips_unused_rows_segment(self):
        assert build_page_url("/list/(:page)/(:rows)/", 3) == "/list/3/"

    def test_substitutes_every_placeholder(self):
        url = build_page_url(
            PATTERN,
            4,
            items_per_page=25,
            sort_pattern="lastname-firstname",
            search_pattern="dillon-or-drop",
        )
        assert url == "/staff/search/4/25/dillon-or-drop/lastname-firstname/"

    def test_strips_every_optional_placeholder(self):
        assert build_page_url(PATTERN, 2) == "/staff/search/2/"

    def test_mixed_usage(self):
        url = build_page_url(PATTERN, 7, sort_pattern="group-lastname")
        assert url == "/staff/search/7/group-lastname/"

    def test_prefixed_segments(self):
        url = build_page_url("/edit-search/page-(:page)/show-(:rows)/", 2, items_per_page=15)
        assert url == "/edit-search/page-2/show-15/"

    def test_placeholder_without_trailing_separator(self):
        assert build_page_url("/list?page=(:page)&rows=(:rows)", 3) == "/list?page=3&rows="
        assert build_page_url("/list/(:page)/(:rows)", 3) == "/list/3/"

    def test_page_number_is_truncated(self):
        assert build_page_url("/list/(:page)/", 3.9) == "/list/3/"

    def test_inserted_values_are_not_rescanned(self):
        url = build_page_url(
            "/list/(:page)/(:sort)/(:search)/",
            1,
            sort_pattern="(:search)",
            search_pattern="(:page)",
        )
        assert url == "/list/1/(:search)/(:page)/"

    def test_pattern_without_placeholders(self):
        assert build_page_url("/static/", 5) == "/static/"

    def test_empty_sort_value_keeps_separator(self):
        assert build_page_url("/list/(:page)/(:sort)/", 1, sort_pattern="") == "/list/1//"
