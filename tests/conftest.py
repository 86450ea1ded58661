"""Shared fixtures with sample API responses."""

from typing import Any, Dict, List

import pytest


def _avatar(character_id: int) -> str:
    return f"https://rickandmortyapi.com/api/character/avatar/{character_id}.jpeg"


@pytest.fixture
def pokemon_records() -> List[Dict[str, Any]]:
    """Pokemon REST response body (no images supplied)."""
    return [
        {"id": "4", "name": "Charmander"},
        {"id": "5", "name": "Charmeleon"},
        {"id": "6", "name": "Charizard"},
    ]


@pytest.fixture
def rest_pages() -> List[Dict[str, Any]]:
    """Two pages from the Rick and Morty REST API."""
    return [
        {
            "info": {
                "count": 591,
                "pages": 30,
                "next": "https://rickandmortyapi.com/api/character/?page=2",
                "prev": None,
            },
            "results": [
                {"id": 1, "name": "Rick Sanchez", "image": _avatar(1)},
                {"id": 2, "name": "Morty Smith", "image": _avatar(2)},
            ],
        },
        {
            "info": {
                "count": 591,
                "pages": 30,
                "next": None,
                "prev": "https://rickandmortyapi.com/api/character/?page=1",
            },
            "results": [
                {"id": 3, "name": "Summer Smith", "image": _avatar(3)},
                {"id": 4, "name": "Beth Smith", "image": _avatar(4)},
            ],
        },
    ]


@pytest.fixture
def graphql_pages() -> List[Dict[str, Any]]:
    """Two ``data`` payloads from the Rick and Morty GraphQL API."""
    return [
        {
            "characters": {
                "results": [
                    {"id": "1", "name": "Rick Sanchez", "image": _avatar(1)},
                    {"id": "2", "name": "Morty Smith", "image": _avatar(2)},
                ],
                "info": {"next": 2},
            }
        },
        {
            "characters": {
                "results": [
                    {"id": "3", "name": "Summer Smith", "image": _avatar(3)},
                    {"id": "4", "name": "Beth Smith", "image": _avatar(4)},
                ],
                "info": {"next": None},
            }
        },
    ]
