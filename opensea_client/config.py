# config.py
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings

MAINNET_API_URL = "https://api.opensea.io"
TESTNET_API_URL = "https://testnets-api.opensea.io"

ASSETS_PATH = "/api/v1/assets/"
ASSET_PATH = "/api/v1/asset/{contract_address}/{token_id}"

API_KEY_HEADER = "X-API-KEY"


class Network(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"

    @classmethod
    def parse(cls, value) -> "Network":
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        # the test network used to be served from rinkeby-api.opensea.io
        if name == "rinkeby":
            return cls.TESTNET
        return cls(name)

    @property
    def base_url(self) -> str:
        return MAINNET_API_URL if self is Network.MAINNET else TESTNET_API_URL


@dataclass(frozen=True)
class TransportConfig:
    """
    HTTP transport settings shared by the blocking and async clients.

    Times are in seconds. read_timeout=None leaves reads unbounded, so a
    request only ends early through connect/TLS limits or cancellation.
    """
    connect_timeout: float = 30.0
    read_timeout: Optional[float] = None
    keep_alive: float = 300.0
    max_idle_connections: int = 100
    idle_connection_timeout: float = 90.0
    tls_handshake_timeout: float = 5.0

    @property
    def requests_timeout(self):
        """(connect, read) tuple in the form requests expects."""
        return (self.connect_timeout, self.read_timeout)


class Settings(BaseSettings):
    OPENSEA_API_KEY: str
    OPENSEA_NETWORK: str = "mainnet"
    OPENSEA_BASE_URL: Optional[str] = None

    OPENSEA_CONNECT_TIMEOUT: float = 30.0
    OPENSEA_READ_TIMEOUT: Optional[float] = None
    OPENSEA_MAX_IDLE_CONNECTIONS: int = 100
    OPENSEA_POSITIVE_PAGING_ONLY: bool = True

    LOG_LEVEL: str = "INFO"

    @property
    def network(self) -> Network:
        return Network.parse(self.OPENSEA_NETWORK)

    @property
    def base_url(self) -> str:
        return (self.OPENSEA_BASE_URL or self.network.base_url).rstrip("/")

    @property
    def transport(self) -> TransportConfig:
        return TransportConfig(
            connect_timeout=self.OPENSEA_CONNECT_TIMEOUT,
            read_timeout=self.OPENSEA_READ_TIMEOUT,
            max_idle_connections=self.OPENSEA_MAX_IDLE_CONNECTIONS,
        )

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
