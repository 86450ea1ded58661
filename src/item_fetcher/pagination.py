"""Sequential page accumulation."""

from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple

from tqdm import tqdm

from .errors import FetchError

# (items, next token, raw response) for one page
Page = Tuple[List[Dict[str, Any]], Optional[Any], Any]

Callback = Callable[[Optional[FetchError], Optional[List[Dict[str, Any]]], Any], None]


class FetchResult(NamedTuple):
    """Outcome of a fetch: either ``error`` or ``items`` plus ``raw`` is set."""

    error: Optional[FetchError]
    items: Optional[List[Dict[str, Any]]]
    raw: Any

    @property
    def ok(self) -> bool:
        return self.error is None


def accumulate_pages(
    fetch_page: Callable[[Optional[Any]], Page],
    callback: Optional[Callback] = None,
    progress: bool = False
) -> FetchResult:
    """
    Fetch pages until the source reports no next page.

    ``fetch_page`` is called with ``None`` for the first page and afterwards
    with the token the previous page returned. Items are concatenated in
    arrival order. The first ``FetchError`` aborts the loop and discards
    whatever was accumulated so far. On success ``raw`` is the body of the
    final page, not the first one.

    Args:
        fetch_page: Callable returning (items, next_token, raw) for a token
        callback: Invoked exactly once with (error, items, raw)
        progress: Show a tqdm page counter

    Returns:
        FetchResult with the same fields passed to the callback
    """
    items: List[Dict[str, Any]] = []
    token = None

    with tqdm(desc="Fetching pages", unit="page", disable=not progress) as pbar:
        try:
            while True:
                page_items, token, raw = fetch_page(token)
                items.extend(page_items)
                pbar.update(1)
                pbar.set_postfix({'items': len(items)})
                if not token:
                    break
        except FetchError as e:
            result = FetchResult(e, None, None)
        else:
            result = FetchResult(None, items, raw)

    if callback is not None:
        callback(*result)
    return result
