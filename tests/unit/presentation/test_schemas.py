"""Tests for src/paginator/presentation/schemas.py"""

import json

from paginator.domain.models.page import NAVIGATION_ELLIPSIS
from paginator.presentation.renderers import render_as_json
from paginator.presentation.schemas import PageLink, PaginationMeta


class TestPaginationMeta:
    def test_from_state(self, small_state):
        meta = PaginationMeta.from_state(small_state)
        assert meta.page == 5
        assert meta.page_size == 10
        assert meta.total_items == 100
        assert meta.total_pages == 10
        assert meta.offset == 40
        assert meta.first_item == 41
        assert meta.last_item == 50
        assert meta.prev_page == 4
        assert meta.next_page == 6
        assert meta.prev_url == "/list/4/"
        assert meta.next_url == "/list/6/"
        assert len(meta.pages) == 10

    def test_empty_state(self, empty_state):
        meta = PaginationMeta.from_state(empty_state)
        assert meta.total_pages == 0
        assert meta.first_item is None
        assert meta.last_item is None
        assert meta.pages == []

    def test_ellipsis_link(self, large_state):
        meta = PaginationMeta.from_state(large_state)
        ellipses = [page for page in meta.pages if page.is_ellipsis]
        assert len(ellipses) == 2
        assert ellipses[0].page_number == NAVIGATION_ELLIPSIS
        assert ellipses[0].page_url is None


class TestPageLink:
    def test_from_descriptor(self, small_state):
        link = PageLink.from_descriptor(small_state.render_as_array()[4])
        assert link.page_number == 5
        assert link.page_url == "/list/5/"
        assert link.is_current_page is True
        assert link.is_ellipsis is False


class TestRenderAsJson:
    def test_round_trips_through_json(self, large_state):
        payload = json.loads(render_as_json(large_state))
        assert payload["page"] == 50
        assert payload["total_pages"] == 100
        assert payload["pages"][0] == {
            "page_number": 1,
            "page_url": "/list/1/",
            "is_current_page": False,
            "is_ellipsis": False,
        }
        assert payload["pages"][1]["page_url"] is None
