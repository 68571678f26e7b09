"""
Async OpenSea client
Same endpoints as OpenSeaClient on an aiohttp session. Cancelling the task
awaiting a call aborts the request; asyncio.CancelledError reaches the caller
unchanged.
"""
import asyncio
import logging
from typing import Dict, Optional, Tuple, Type, Union

import aiohttp

from opensea_client.config import API_KEY_HEADER, Network, Settings, TransportConfig
from opensea_client.errors import TransportError
from opensea_client.models import Asset, AssetResponse, GetAssetsParams
from opensea_client.query import asset_path, assets_path
from opensea_client.responses import ModelT, check_status, decode_body

logger = logging.getLogger(__name__)


def build_timeout(transport: TransportConfig) -> aiohttp.ClientTimeout:
    return aiohttp.ClientTimeout(
        total=None,
        connect=transport.connect_timeout + transport.tls_handshake_timeout,
        sock_connect=transport.connect_timeout,
        sock_read=transport.read_timeout,
    )


def build_connector(transport: TransportConfig) -> aiohttp.TCPConnector:
    return aiohttp.TCPConnector(
        limit=transport.max_idle_connections,
        keepalive_timeout=transport.idle_connection_timeout,
    )


class AsyncOpenSeaClient:
    """
    Async client for the OpenSea v1 asset endpoints.

    The session is created on first use (it must belong to a running loop)
    unless one is passed in. Use as an async context manager or call close().
    """

    def __init__(
        self,
        api_key: str,
        network: Union[Network, str] = Network.MAINNET,
        *,
        base_url: Optional[str] = None,
        transport: Optional[TransportConfig] = None,
        session: Optional[aiohttp.ClientSession] = None,
        positive_paging_only: bool = True,
    ):
        if not api_key or not api_key.strip():
            raise ValueError("an OpenSea API key is required")

        self.network = Network.parse(network)
        self.base_url = (base_url or self.network.base_url).rstrip("/")
        self.transport = transport or TransportConfig()
        self.positive_paging_only = positive_paging_only
        self._api_key = api_key

        self._owns_session = session is None
        self._session = session

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "AsyncOpenSeaClient":
        return cls(
            settings.OPENSEA_API_KEY,
            settings.network,
            base_url=settings.base_url,
            transport=settings.transport,
            positive_paging_only=settings.OPENSEA_POSITIVE_PAGING_ONLY,
            **kwargs,
        )

    def __repr__(self) -> str:
        return f"AsyncOpenSeaClient(network={self.network.value!r}, base_url={self.base_url!r})"

    async def __aenter__(self) -> "AsyncOpenSeaClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession(
                connector=build_connector(self.transport),
                timeout=build_timeout(self.transport),
            )
        return self._session

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            API_KEY_HEADER: self._api_key,
        }

    async def _fetch(self, path: str) -> Tuple[int, bytes]:
        url = self.base_url + path
        session = self._get_session()
        logger.debug("GET %s", url)
        try:
            async with session.get(url, headers=self._headers()) as resp:
                body = await resp.read()
                status_code = resp.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("GET %s failed: %s", url, e)
            raise TransportError(f"GET {url} failed: {e!r}", cause=e) from e

        logger.debug("GET %s -> %s (%d bytes)", url, status_code, len(body))
        check_status(status_code, body)
        return status_code, body

    async def _get_model(self, path: str, model: Type[ModelT]) -> ModelT:
        status_code, body = await self._fetch(path)
        return decode_body(status_code, body, model)

    async def get_path(self, path: str) -> bytes:
        _, body = await self._fetch(path)
        return body

    async def get_assets(self, params: Optional[GetAssetsParams] = None) -> AssetResponse:
        path = assets_path(params, self.positive_paging_only)
        return await self._get_model(path, AssetResponse)

    async def get_asset(self, contract_address: str, token_id: Union[int, str]) -> Asset:
        return await self._get_model(asset_path(contract_address, token_id), Asset)
