# routers.py
from functools import lru_cache
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from opensea_client.async_client import AsyncOpenSeaClient
from opensea_client.config import get_settings
from opensea_client.errors import (
    OpenSeaError,
    ResponseDecodeError,
    ResponseError,
    TransportError,
)
from opensea_client.models import Asset, AssetResponse, GetAssetsParams

api_router = APIRouter()


@lru_cache(maxsize=1)
def get_client() -> AsyncOpenSeaClient:
    return AsyncOpenSeaClient.from_settings(get_settings())


def to_http_exception(e: OpenSeaError) -> HTTPException:
    """Map client errors to the status this API answers with"""
    if isinstance(e, TransportError):
        return HTTPException(504, f"OpenSea unreachable: {e}")
    if isinstance(e, ResponseDecodeError):
        return HTTPException(502, f"Malformed OpenSea response: {e}")
    if isinstance(e, ResponseError):
        return HTTPException(
            502, {"error": str(e), "upstream_status": e.status_code}
        )
    return HTTPException(500, str(e))


@api_router.get("/health")
async def health():
    return {"status": "healthy"}


@api_router.get("/assets", response_model=AssetResponse)
async def list_assets(
    owner: Optional[str] = None,
    token_ids: Optional[List[int]] = Query(None),
    collection: str = "",
    collection_slug: str = "",
    collection_editor: str = "",
    order_by: str = "",
    order_direction: str = "",
    asset_contract_address: Optional[str] = None,
    asset_contract_addresses: Optional[List[str]] = Query(None),
    offset: Optional[int] = None,
    cursor: Optional[int] = None,
    limit: Optional[int] = None,
    include_orders: Optional[bool] = None,
    client: AsyncOpenSeaClient = Depends(get_client),
):
    """List assets, forwarding the filters to OpenSea"""
    try:
        params = GetAssetsParams(
            owner=owner,
            token_ids=token_ids,
            collection=collection,
            collection_slug=collection_slug,
            collection_editor=collection_editor,
            order_by=order_by,
            order_direction=order_direction,
            asset_contract_address=asset_contract_address,
            asset_contract_addresses=asset_contract_addresses,
            offset=offset,
            cursor=cursor,
            limit=limit,
            include_orders=include_orders,
        )
    except ValidationError as e:
        raise HTTPException(422, str(e))

    try:
        return await client.get_assets(params)
    except OpenSeaError as e:
        raise to_http_exception(e)


@api_router.get("/asset/{contract_address}/{token_id}", response_model=Asset)
async def get_asset(
    contract_address: str,
    token_id: str,
    client: AsyncOpenSeaClient = Depends(get_client),
):
    """Get a single asset; token_id is kept as a string so uint256 ids survive"""
    try:
        return await client.get_asset(contract_address, token_id)
    except OpenSeaError as e:
        raise to_http_exception(e)
    except (ValueError, TypeError) as e:
        raise HTTPException(422, str(e))
