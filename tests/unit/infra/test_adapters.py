"""Tests for src/paginator/infrastructure/adapters.py"""

from paginator.infrastructure.adapters import InMemoryPageSource


class TestInMemoryPageSource:
    def test_count(self, page_source):
        assert page_source.count() == 95

    def test_list_page(self, page_source):
        items, total = page_source.list_page(offset=90, limit=10)
        assert items == [91, 92, 93, 94, 95]
        assert total == 95

    def test_offset_beyond_end(self, page_source):
        items, total = page_source.list_page(offset=200, limit=10)
        assert items == []
        assert total == 95

    def test_empty(self):
        source = InMemoryPageSource()
        assert source.count() == 0
        assert source.list_page() == ([], 0)
