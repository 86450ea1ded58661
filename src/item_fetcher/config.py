"""Endpoint configuration loaded from the environment."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_POKEMON_API_URL = "http://localhost:3000/pokemon"
DEFAULT_RICK_AND_MORTY_API_URL = "https://rickandmortyapi.com/api/character"
DEFAULT_RICK_AND_MORTY_GRAPHQL_URL = "https://rickandmortyapi.com/graphql"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class FetcherConfig:
    """URLs and request timeout used by the fetch clients."""

    pokemon_url: str = DEFAULT_POKEMON_API_URL
    rick_and_morty_url: str = DEFAULT_RICK_AND_MORTY_API_URL
    rick_and_morty_graphql_url: str = DEFAULT_RICK_AND_MORTY_GRAPHQL_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, timeout: Optional[float] = None) -> "FetcherConfig":
        """
        Build a config from environment variables (and a .env file if present).

        Args:
            timeout: Overrides ITEM_FETCHER_TIMEOUT when given

        Raises:
            ValueError: If ITEM_FETCHER_TIMEOUT is not a positive number
        """
        load_dotenv()

        if timeout is None:
            raw_timeout = os.environ.get("ITEM_FETCHER_TIMEOUT")
            if raw_timeout:
                try:
                    timeout = float(raw_timeout)
                except ValueError:
                    raise ValueError(
                        f"ITEM_FETCHER_TIMEOUT must be a number, got {raw_timeout!r}"
                    ) from None
            else:
                timeout = DEFAULT_TIMEOUT

        if timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {timeout}")

        return cls(
            pokemon_url=os.environ.get("POKEMON_API_URL") or DEFAULT_POKEMON_API_URL,
            rick_and_morty_url=(
                os.environ.get("RICK_AND_MORTY_API_URL") or DEFAULT_RICK_AND_MORTY_API_URL
            ),
            rick_and_morty_graphql_url=(
                os.environ.get("RICK_AND_MORTY_GRAPHQL_URL")
                or DEFAULT_RICK_AND_MORTY_GRAPHQL_URL
            ),
            timeout=timeout,
        )
