"""
Response validation shared by the blocking and async clients
"""
import logging
from typing import Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from opensea_client.errors import (
    RequestNotSuccessfulError,
    ResponseDecodeError,
    UnexpectedResponseError,
)
from opensea_client.models import ErrorEnvelope

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _text(body: Union[bytes, str]) -> str:
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return body


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


def check_status(status_code: int, body: Union[bytes, str]) -> None:
    """
    Raise for any non-2xx response.

    A body that decodes to {"success": false} (or to an object without the
    flag) is a failure reported by the service; anything else is reported
    together with the raw status and body.
    """
    if is_success_status(status_code):
        return

    text = _text(body)
    logger.warning("OpenSea responded with status %s", status_code)
    try:
        envelope = ErrorEnvelope.model_validate_json(body)
    except ValidationError:
        raise UnexpectedResponseError(status_code, text) from None

    if not envelope.success:
        raise RequestNotSuccessfulError(status_code, text)
    raise UnexpectedResponseError(status_code, text)


def decode_body(status_code: int, body: Union[bytes, str], model: Type[ModelT]) -> ModelT:
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise ResponseDecodeError(status_code, _text(body), str(e)) from e

