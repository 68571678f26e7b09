"""
Tests for address normalization and response models.
"""

import pytest
from pydantic import ValidationError
from web3 import Web3

from opensea_client.models import (
    NULL_ADDRESS,
    Asset,
    AssetResponse,
    ErrorEnvelope,
    GetAssetsParams,
    is_null_address,
    to_address,
)

from conftest import BAYC, make_asset


def test_to_address_checksums():
    assert to_address(BAYC) == Web3.to_checksum_address(BAYC)


def test_to_address_idempotent():
    assert to_address(to_address(BAYC)) == to_address(BAYC)


def test_to_address_strips_whitespace():
    assert to_address(f"  {BAYC} ") == to_address(BAYC)


def test_empty_address_is_null():
    assert to_address("") == NULL_ADDRESS
    assert is_null_address(to_address(""))


@pytest.mark.parametrize("value", ["0xabc", "not an address", "0x" + "g" * 40])
def test_invalid_address_rejected(value):
    with pytest.raises(ValueError):
        to_address(value)


def test_non_string_address_rejected():
    with pytest.raises(ValueError):
        to_address(1234)


def test_is_null_address():
    assert is_null_address(None)
    assert is_null_address(NULL_ADDRESS)
    assert not is_null_address(to_address(BAYC))


def test_params_validate_addresses():
    with pytest.raises(ValidationError):
        GetAssetsParams(owner="0x1234")
    with pytest.raises(ValidationError):
        GetAssetsParams(asset_contract_addresses=[BAYC, "bogus"])


def test_params_keep_unset_distinct_from_zero():
    params = GetAssetsParams(limit=0, include_orders=False)
    assert params.limit == 0
    assert params.cursor is None
    assert params.include_orders is False


def test_envelope_defaults_to_failure():
    assert ErrorEnvelope.model_validate_json("{}").success is False
    assert ErrorEnvelope.model_validate_json('{"success": true, "x": 1}').success is True


def test_numeric_token_id_becomes_decimal_string():
    asset = Asset.model_validate(make_asset(token_id=2**200))
    assert asset.token_id == str(2**200)


def test_asset_nested_models():
    asset = Asset.model_validate(make_asset())
    assert asset.asset_contract.schema_name == "ERC721"
    assert asset.asset_contract.owner == 1234
    assert asset.traits[0].trait_count == 1000


def test_empty_page():
    page = AssetResponse.model_validate_json('{"assets": []}')
    assert page.assets == []
    assert page.next is None
