from unittest.mock import MagicMock

import pytest

from item_fetcher.errors import FetchError
from item_fetcher.pagination import FetchResult, accumulate_pages


def _pages(*pages):
    """Page source returning the given (items, next, raw) tuples in order."""
    return MagicMock(side_effect=list(pages))


class TestAccumulatePages:

    def test_single_page(self):
        fetch_page = _pages(([{"id": 1}], None, "raw-1"))
        handler = MagicMock()

        result = accumulate_pages(fetch_page, handler)

        handler.assert_called_once_with(None, [{"id": 1}], "raw-1")
        assert result == FetchResult(None, [{"id": 1}], "raw-1")
        assert result.ok
        fetch_page.assert_called_once_with(None)

    def test_items_keep_page_order(self):
        fetch_page = _pages(
            ([{"id": 1}, {"id": 2}], "b", "raw-a"),
            ([{"id": 3}], "c", "raw-b"),
            ([{"id": 4}, {"id": 5}], None, "raw-c"),
        )
        handler = MagicMock()

        accumulate_pages(fetch_page, handler)

        handler.assert_called_once_with(
            None, [{"id": i} for i in range(1, 6)], "raw-c"
        )
        assert [c.args[0] for c in fetch_page.call_args_list] == [None, "b", "c"]

    @pytest.mark.parametrize("terminal", [None, 0, ""])
    def test_falsy_token_ends_loop(self, terminal):
        fetch_page = _pages(([{"id": 1}], terminal, "raw"))
        result = accumulate_pages(fetch_page)
        assert result.items == [{"id": 1}]
        assert fetch_page.call_count == 1

    def test_empty_page_still_succeeds(self):
        result = accumulate_pages(_pages(([], None, {})))
        assert result == FetchResult(None, [], {})

    def test_error_on_first_page(self):
        error = FetchError("Network Error")
        fetch_page = MagicMock(side_effect=error)
        handler = MagicMock()

        result = accumulate_pages(fetch_page, handler)

        handler.assert_called_once_with(error, None, None)
        assert result.error is error
        assert not result.ok
        assert fetch_page.call_count == 1

    def test_error_mid_pagination_discards_partial_items(self):
        error = FetchError("Network Error")
        fetch_page = _pages(([{"id": 1}], 2, "raw-1"), error)
        handler = MagicMock()

        result = accumulate_pages(fetch_page, handler)

        handler.assert_called_once_with(error, None, None)
        assert result.items is None
        assert result.raw is None
        assert fetch_page.call_count == 2

    def test_other_exceptions_propagate(self):
        fetch_page = MagicMock(side_effect=KeyError("bug"))
        handler = MagicMock()

        with pytest.raises(KeyError):
            accumulate_pages(fetch_page, handler)
        handler.assert_not_called()

    def test_callback_is_optional(self):
        result = accumulate_pages(_pages(([{"id": 1}], None, "raw")))
        assert result.items == [{"id": 1}]

    def test_progress_bar(self, capsys):
        accumulate_pages(_pages(([{"id": 1}], 2, "a"), ([{"id": 2}], None, "b")), progress=True)
        assert "Fetching pages" in capsys.readouterr().err
