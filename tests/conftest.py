"""
Shared fixtures for the OpenSea client tests.
No test touches the network: the blocking client gets a mocked
requests.Session, the async client a fake aiohttp session.
"""

import json

import pytest
import requests

from opensea_client.config import get_settings
from opensea_client.models import to_address

BAYC = "0xbc4ca0eda7647a8ab7c2061c2e118a18a936f13d"
PUNKS = "0xb47e3cd837ddf8e4c57f05d70ab865de6e193bbb"
OWNER = "0x742d35cc6634c0532925a3b844bc9e7595f0beb0"

BIG_TOKEN_ID = 123456789012345678901234567890


def make_asset(token_id="1", contract=BAYC, **extra):
    asset = {
        "id": 17,
        "token_id": token_id,
        "num_sales": 3,
        "name": f"Ape #{token_id}",
        "image_url": "https://img.example/ape.png",
        "permalink": f"https://opensea.io/assets/{contract}/{token_id}",
        "asset_contract": {
            "address": contract,
            "asset_contract_type": "non-fungible",
            "schema_name": "ERC721",
            "symbol": "BAYC",
            "owner": 1234,
        },
        "collection": {"name": "Bored Ape Yacht Club", "slug": "boredapeyachtclub"},
        "owner": {
            "address": OWNER,
            "profile_img_url": "https://img.example/me.png",
            "user": {"username": "alice"},
        },
        "traits": [{"trait_type": "Fur", "value": "Brown", "trait_count": 1000}],
    }
    asset.update(extra)
    return asset


@pytest.fixture
def checksum():
    """Normalize a lowercase address the same way the client does."""
    return to_address


@pytest.fixture
def assets_body():
    return json.dumps(
        {"assets": [make_asset("1"), make_asset("2")], "next": "cursor-2", "previous": None}
    ).encode()


@pytest.fixture
def asset_body():
    return json.dumps(make_asset(str(BIG_TOKEN_ID))).encode()


@pytest.fixture
def make_response():
    def _make(status_code, body):
        response = requests.Response()
        response.status_code = status_code
        response._content = body.encode() if isinstance(body, str) else body
        return response

    return _make


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
