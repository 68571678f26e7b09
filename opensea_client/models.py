# models.py
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, NonNegativeInt, field_validator
from web3 import Web3

NULL_ADDRESS = "0x0000000000000000000000000000000000000000"


def to_address(value: Any) -> str:
    """
    Normalize an address to its checksummed form.
    An empty string is the null address.
    """
    if not isinstance(value, str):
        raise ValueError(f"address must be a hex string, got {type(value).__name__}")
    value = value.strip()
    if value == "":
        return NULL_ADDRESS
    if not Web3.is_address(value):
        raise ValueError(f"invalid address: {value!r}")
    return Web3.to_checksum_address(value)


def is_null_address(address: Optional[str]) -> bool:
    return address is None or address == "" or address == NULL_ADDRESS


Address = Annotated[str, BeforeValidator(to_address)]


class GetAssetsParams(BaseModel):
    """Filters for the asset listing endpoint. None means the filter is not sent."""
    owner: Optional[Address] = None
    token_ids: Optional[List[NonNegativeInt]] = None
    collection: str = ""
    collection_slug: str = ""
    collection_editor: str = ""
    order_by: str = ""
    order_direction: str = ""
    asset_contract_address: Optional[Address] = None
    asset_contract_addresses: Optional[List[Address]] = None
    offset: Optional[int] = None
    cursor: Optional[int] = None
    limit: Optional[int] = None
    include_orders: Optional[bool] = None

    class Config:
        frozen = True
        extra = "forbid"


class ErrorEnvelope(BaseModel):
    """Body returned with failed requests. A missing flag counts as a failure."""
    success: bool = False

    class Config:
        extra = "ignore"


# ============================================================================
# RESPONSE MODELS - remote schema, unknown keys are kept
# ============================================================================

class User(BaseModel):
    username: Optional[str] = None

    class Config:
        extra = "allow"


class Account(BaseModel):
    address: Optional[str] = None
    profile_img_url: Optional[str] = None
    user: Optional[User] = None

    class Config:
        extra = "allow"


class Trait(BaseModel):
    trait_type: Optional[str] = None
    value: Any = None
    display_type: Optional[str] = None
    max_value: Any = None
    trait_count: Optional[int] = None
    order: Any = None

    class Config:
        extra = "allow"


class AssetContract(BaseModel):
    address: Optional[str] = None
    asset_contract_type: Optional[str] = None
    created_date: Optional[str] = None
    name: Optional[str] = None
    nft_version: Optional[str] = None
    opensea_version: Optional[str] = None
    owner: Optional[int] = None
    schema_name: Optional[str] = None
    symbol: Optional[str] = None
    total_supply: Optional[str] = None
    description: Optional[str] = None
    external_link: Optional[str] = None
    image_url: Optional[str] = None
    payout_address: Optional[str] = None
    seller_fee_basis_points: Optional[int] = None
    buyer_fee_basis_points: Optional[int] = None

    class Config:
        extra = "allow"


class Collection(BaseModel):
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    banner_image_url: Optional[str] = None
    external_url: Optional[str] = None
    created_date: Optional[str] = None
    safelist_request_status: Optional[str] = None
    hidden: Optional[bool] = None
    featured: Optional[bool] = None

    class Config:
        extra = "allow"


class Asset(BaseModel):
    """A single NFT as returned by /api/v1/asset/{contract}/{token_id}"""
    id: Optional[int] = None
    token_id: str
    num_sales: Optional[int] = None
    background_color: Optional[str] = None
    image_url: Optional[str] = None
    image_preview_url: Optional[str] = None
    image_thumbnail_url: Optional[str] = None
    image_original_url: Optional[str] = None
    animation_url: Optional[str] = None
    animation_original_url: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    external_link: Optional[str] = None
    permalink: Optional[str] = None
    decimals: Optional[int] = None
    token_metadata: Optional[str] = None
    asset_contract: Optional[AssetContract] = None
    collection: Optional[Collection] = None
    owner: Optional[Account] = None
    creator: Optional[Account] = None
    traits: List[Trait] = []
    last_sale: Optional[Dict[str, Any]] = None
    top_bid: Any = None
    listing_date: Optional[str] = None
    is_presale: Optional[bool] = None
    sell_orders: Optional[List[Dict[str, Any]]] = None
    orders: Optional[List[Dict[str, Any]]] = None
    top_ownerships: List[Dict[str, Any]] = []

    @field_validator("token_id", mode="before")
    @classmethod
    def _token_id_as_decimal(cls, value: Union[str, int]) -> str:
        # uint256 ids can arrive as JSON numbers from some endpoints
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    class Config:
        extra = "allow"


class AssetResponse(BaseModel):
    """Page returned by /api/v1/assets/"""
    assets: List[Asset] = []
    next: Optional[str] = None
    previous: Optional[str] = None

    class Config:
        extra = "allow"
