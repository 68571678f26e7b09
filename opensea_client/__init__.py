"""
OpenSea client package
Typed parameters, query encoding and blocking/async clients for the v1 asset API
"""

from .config import (
    MAINNET_API_URL,
    TESTNET_API_URL,
    Network,
    Settings,
    TransportConfig,
    get_settings,
)
from .models import (
    NULL_ADDRESS,
    Account,
    Address,
    Asset,
    AssetContract,
    AssetResponse,
    Collection,
    ErrorEnvelope,
    GetAssetsParams,
    Trait,
    User,
    is_null_address,
    to_address,
)
from .query import asset_path, assets_path, encode_assets_query
from .errors import (
    OpenSeaError,
    RequestNotSuccessfulError,
    ResponseDecodeError,
    ResponseError,
    TransportError,
    UnexpectedResponseError,
)
from .client import OpenSeaClient
from .async_client import AsyncOpenSeaClient

__all__ = [
    # Config
    'MAINNET_API_URL',
    'TESTNET_API_URL',
    'Network',
    'Settings',
    'TransportConfig',
    'get_settings',

    # Models
    'NULL_ADDRESS',
    'Account',
    'Address',
    'Asset',
    'AssetContract',
    'AssetResponse',
    'Collection',
    'ErrorEnvelope',
    'GetAssetsParams',
    'Trait',
    'User',
    'is_null_address',
    'to_address',

    # Encoding
    'asset_path',
    'assets_path',
    'encode_assets_query',

    # Errors
    'OpenSeaError',
    'RequestNotSuccessfulError',
    'ResponseDecodeError',
    'ResponseError',
    'TransportError',
    'UnexpectedResponseError',

    # Clients
    'OpenSeaClient',
    'AsyncOpenSeaClient',
]
