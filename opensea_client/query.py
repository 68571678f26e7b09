"""
Query string encoding for the asset listing endpoint
Only the filters the caller actually set end up in the URL
"""
import re
from typing import List, Optional, Tuple, Union
from urllib.parse import urlencode

from opensea_client.config import ASSET_PATH, ASSETS_PATH
from opensea_client.models import GetAssetsParams, is_null_address, to_address

DECIMAL_RE = re.compile(r"^[0-9]+$")

STRING_FIELDS = (
    "collection",
    "collection_slug",
    "collection_editor",
    "order_by",
    "order_direction",
)

PAGING_FIELDS = ("offset", "cursor", "limit")


def _include_paging(value: Optional[int], positive_only: bool) -> bool:
    if value is None:
        return False
    return value > 0 if positive_only else True


def assets_query_pairs(
    params: GetAssetsParams, positive_paging_only: bool = True
) -> List[Tuple[str, str]]:
    """
    Build the (key, value) pairs for a listing request, sorted by key.

    Args:
        params: listing filters
        positive_paging_only: when True, offset/cursor/limit are sent only
            if they are greater than zero; when False any set value is sent

    Returns:
        List of pairs; list filters contribute one pair per element
    """
    pairs: List[Tuple[str, str]] = []

    if not is_null_address(params.owner):
        pairs.append(("owner", params.owner))

    for token_id in params.token_ids or []:
        pairs.append(("token_ids", str(int(token_id))))

    for field in STRING_FIELDS:
        value = getattr(params, field)
        if value:
            pairs.append((field, value))

    if not is_null_address(params.asset_contract_address):
        pairs.append(("asset_contract_address", params.asset_contract_address))

    for address in params.asset_contract_addresses or []:
        if not is_null_address(address):
            pairs.append(("asset_contract_addresses", address))

    for field in PAGING_FIELDS:
        value = getattr(params, field)
        if _include_paging(value, positive_paging_only):
            pairs.append((field, str(value)))

    if params.include_orders is not None:
        pairs.append(("include_orders", "true" if params.include_orders else "false"))

    # stable sort: repeated keys keep the caller's order
    pairs.sort(key=lambda pair: pair[0])
    return pairs


def encode_assets_query(
    params: Optional[GetAssetsParams] = None, positive_paging_only: bool = True
) -> str:
    """URL-encoded query string for /api/v1/assets/"""
    if params is None:
        return ""
    return urlencode(assets_query_pairs(params, positive_paging_only))


def assets_path(
    params: Optional[GetAssetsParams] = None, positive_paging_only: bool = True
) -> str:
    return ASSETS_PATH + "?" + encode_assets_query(params, positive_paging_only)


def token_id_to_decimal(token_id: Union[int, str]) -> str:
    """
    Render a token id in base 10.
    Token ids are uint256, so they are handled as Python ints, never floats.
    """
    if isinstance(token_id, bool):
        raise TypeError("token id must be an integer, got bool")
    if isinstance(token_id, str):
        token_id = token_id.strip()
        if not DECIMAL_RE.match(token_id):
            raise ValueError(f"token id must be a non-negative decimal integer: {token_id!r}")
        token_id = int(token_id)
    if not isinstance(token_id, int):
        raise TypeError(f"token id must be an integer, got {type(token_id).__name__}")
    if token_id < 0:
        raise ValueError(f"token id must be non-negative: {token_id}")
    return str(token_id)


def asset_path(contract_address: str, token_id: Union[int, str]) -> str:
    address = to_address(contract_address)
    if is_null_address(address):
        raise ValueError("a contract address is required")
    return ASSET_PATH.format(
        contract_address=address, token_id=token_id_to_decimal(token_id)
    )
