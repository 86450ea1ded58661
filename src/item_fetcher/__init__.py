"""Paginated item fetching from REST and GraphQL APIs."""

from .errors import FetchError
from .fetcher import (
    ItemFetcher,
    get_pokemon_items,
    get_rick_and_morty_items,
    query_rick_and_morty_items,
)
from .pagination import FetchResult, accumulate_pages
from .utils import item_image_url

__version__ = "1.0.0"
__all__ = [
    "FetchError",
    "FetchResult",
    "ItemFetcher",
    "accumulate_pages",
    "get_pokemon_items",
    "get_rick_and_morty_items",
    "item_image_url",
    "query_rick_and_morty_items",
]
