"""Fetch functions for the item sources and a fetcher class wrapping them."""

import functools
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from .client import GraphQLClient, RestClient
from .config import (
    DEFAULT_POKEMON_API_URL,
    DEFAULT_RICK_AND_MORTY_API_URL,
    DEFAULT_RICK_AND_MORTY_GRAPHQL_URL,
    FetcherConfig,
)
from .errors import FetchError
from .pagination import Callback, FetchResult, Page, accumulate_pages
from .queries import CHARACTERS_QUERY
from .utils import extract_item, extract_page


def _pokemon_page(client: RestClient, url: str, token: Optional[Any]) -> Page:
    body = client.get(url)
    if not isinstance(body, list):
        raise FetchError("Expected a list of items", url=url)
    return [extract_item(record) for record in body], None, body


def _rick_and_morty_page(client: RestClient, url: str, token: Optional[Any]) -> Page:
    # The REST API hands out the next page as a full URL
    page_url = token or url
    body = client.get(page_url)
    items, next_url = extract_page(body)
    return items, next_url, body


def _rick_and_morty_graphql_page(client: GraphQLClient, token: Optional[Any]) -> Page:
    data = client.execute(CHARACTERS_QUERY, {"page": token or 1})
    if not isinstance(data, dict):
        raise FetchError("GraphQL data is not an object")
    items, next_page = extract_page(data.get('characters'))
    return items, next_page, data


def get_pokemon_items(
    callback: Optional[Callback] = None,
    client: Optional[RestClient] = None,
    url: str = DEFAULT_POKEMON_API_URL
) -> FetchResult:
    """
    Fetch the Pokemon collection (a single unpaginated page).

    Items without an ``image`` get one derived from their name.
    """
    client = client or RestClient()
    return accumulate_pages(functools.partial(_pokemon_page, client, url), callback)


def get_rick_and_morty_items(
    callback: Optional[Callback] = None,
    client: Optional[RestClient] = None,
    url: str = DEFAULT_RICK_AND_MORTY_API_URL,
    progress: bool = False
) -> FetchResult:
    """Fetch every Rick and Morty character through the REST API."""
    client = client or RestClient()
    return accumulate_pages(
        functools.partial(_rick_and_morty_page, client, url),
        callback,
        progress=progress,
    )


def query_rick_and_morty_items(
    callback: Optional[Callback] = None,
    client: Optional[GraphQLClient] = None,
    url: str = DEFAULT_RICK_AND_MORTY_GRAPHQL_URL,
    progress: bool = False
) -> FetchResult:
    """Fetch every Rick and Morty character through the GraphQL API."""
    client = client or GraphQLClient(url)
    return accumulate_pages(
        functools.partial(_rick_and_morty_graphql_page, client),
        callback,
        progress=progress,
    )


class ItemFetcher:
    """Fetcher that keeps the last fetched items and exports them."""

    SOURCES = ("pokemon", "rick-and-morty", "rick-and-morty-graphql")

    def __init__(self, config: Optional[FetcherConfig] = None):
        """
        Initialize the fetcher.

        Args:
            config: Endpoint configuration, defaults to ``FetcherConfig()``
        """
        self.config = config or FetcherConfig()
        self.rest_client = RestClient(timeout=self.config.timeout)
        self.graphql_client = GraphQLClient(
            self.config.rick_and_morty_graphql_url,
            timeout=self.config.timeout,
        )
        self._items: List[Dict[str, Any]] = []

    @property
    def items(self) -> List[Dict[str, Any]]:
        """Get the items from the last successful fetch."""
        return self._items

    def fetch(self, source: str, progress: bool = True) -> List[Dict[str, Any]]:
        """
        Fetch all items of a source.

        Args:
            source: One of ``SOURCES``
            progress: Show a page progress bar for paginated sources

        Returns:
            List of item dictionaries

        Raises:
            ValueError: On an unknown source
            FetchError: If any page fails
        """
        if source == "pokemon":
            result = get_pokemon_items(
                client=self.rest_client, url=self.config.pokemon_url
            )
        elif source == "rick-and-morty":
            result = get_rick_and_morty_items(
                client=self.rest_client,
                url=self.config.rick_and_morty_url,
                progress=progress,
            )
        elif source == "rick-and-morty-graphql":
            result = query_rick_and_morty_items(
                client=self.graphql_client, progress=progress
            )
        else:
            raise ValueError(
                f"Unknown source: {source}. Expected one of {', '.join(self.SOURCES)}"
            )

        if result.error is not None:
            raise result.error

        self._items = result.items
        print(f"Fetched {len(self._items)} items from {source}")
        return self._items

    def to_dataframe(self) -> pd.DataFrame:
        """Convert fetched items to a DataFrame with id, name and image columns."""
        return pd.DataFrame(self._items, columns=['id', 'name', 'image'])

    def save_to_parquet(self, output_path: Path) -> None:
        """
        Save fetched items to a parquet file.

        Args:
            output_path: Path to output parquet file
        """
        df = self.to_dataframe()
        if df.empty:
            print("No data to save.")
            return

        output_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_parquet(output_path, index=False)
        print(f"Saved {len(df)} items to {output_path}")

    def save_to_csv(self, output_path: Path) -> None:
        """
        Save fetched items to a CSV file.

        Args:
            output_path: Path to output CSV file
        """
        df = self.to_dataframe()
        if df.empty:
            print("No data to save.")
            return

        output_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_path, index=False)
        print(f"Saved {len(df)} items to {output_path}")
