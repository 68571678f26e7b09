"""
OpenSea REST client
Blocking client built on a pooled requests.Session
"""
import logging
import socket
from typing import Dict, Optional, Tuple, Type, Union

import requests
from requests.adapters import HTTPAdapter
from urllib3.connection import HTTPConnection
from urllib3.util.retry import Retry

from opensea_client.config import API_KEY_HEADER, Network, Settings, TransportConfig
from opensea_client.errors import TransportError
from opensea_client.models import Asset, AssetResponse, GetAssetsParams
from opensea_client.query import asset_path, assets_path
from opensea_client.responses import ModelT, check_status, decode_body

logger = logging.getLogger(__name__)


class KeepAliveAdapter(HTTPAdapter):
    """HTTPAdapter whose pooled sockets use TCP keep-alive probes."""

    def __init__(self, keep_alive: float, **kwargs):
        options = list(HTTPConnection.default_socket_options)
        options.append((socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1))
        if hasattr(socket, "TCP_KEEPIDLE"):
            options.append((socket.IPPROTO_TCP, socket.TCP_KEEPIDLE, int(keep_alive)))
        self.socket_options = options
        super().__init__(**kwargs)

    def init_poolmanager(self, *args, **kwargs):
        kwargs["socket_options"] = self.socket_options
        super().init_poolmanager(*args, **kwargs)


def build_session(transport: TransportConfig) -> requests.Session:
    # No retries: every call is exactly one round trip
    adapter = KeepAliveAdapter(
        keep_alive=transport.keep_alive,
        pool_connections=transport.max_idle_connections,
        pool_maxsize=transport.max_idle_connections,
        max_retries=Retry(total=0, read=False),
    )
    session = requests.Session()
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


class OpenSeaClient:
    """
    Client for the OpenSea v1 asset endpoints.

    - One GET per call, no retries and no caching
    - The API key is sent as a header and never logged
    - Safe to share between threads: nothing is mutated after construction
    """

    def __init__(
        self,
        api_key: str,
        network: Union[Network, str] = Network.MAINNET,
        *,
        base_url: Optional[str] = None,
        transport: Optional[TransportConfig] = None,
        session: Optional[requests.Session] = None,
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
        self._session = session if session is not None else build_session(self.transport)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "OpenSeaClient":
        return cls(
            settings.OPENSEA_API_KEY,
            settings.network,
            base_url=settings.base_url,
            transport=settings.transport,
            positive_paging_only=settings.OPENSEA_POSITIVE_PAGING_ONLY,
            **kwargs,
        )

    def __repr__(self) -> str:
        return f"OpenSeaClient(network={self.network.value!r}, base_url={self.base_url!r})"

    def __enter__(self) -> "OpenSeaClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            API_KEY_HEADER: self._api_key,
        }

    def _fetch(self, path: str) -> Tuple[int, bytes]:
        url = self.base_url + path
        logger.debug("GET %s", url)
        try:
            response = self._session.get(
                url,
                headers=self._headers(),
                timeout=self.transport.requests_timeout,
            )
        except requests.RequestException as e:
            logger.error("GET %s failed: %s", url, e)
            raise TransportError(f"GET {url} failed: {e}", cause=e) from e

        logger.debug("GET %s -> %s (%d bytes)", url, response.status_code, len(response.content))
        check_status(response.status_code, response.content)
        return response.status_code, response.content

    def _get_model(self, path: str, model: Type[ModelT]) -> ModelT:
        status_code, body = self._fetch(path)
        return decode_body(status_code, body, model)

    def get_path(self, path: str) -> bytes:
        """Authenticated GET of an API path; returns the raw body of a 2xx response."""
        _, body = self._fetch(path)
        return body

    def get_assets(self, params: Optional[GetAssetsParams] = None) -> AssetResponse:
        """
        List assets matching the given filters.

        Args:
            params: listing filters; None lists without filters

        Returns:
            Decoded page of assets

        Raises:
            TransportError: the request did not complete
            RequestNotSuccessfulError: the service reported a failure
            UnexpectedResponseError: non-2xx status with an unrecognised body
            ResponseDecodeError: 2xx status with a malformed payload
        """
        path = assets_path(params, self.positive_paging_only)
        return self._get_model(path, AssetResponse)

    def get_asset(self, contract_address: str, token_id: Union[int, str]) -> Asset:
        """Fetch one asset by contract address and (arbitrary precision) token id."""
        return self._get_model(asset_path(contract_address, token_id), Asset)
