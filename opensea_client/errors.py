"""
Client exceptions
Every failure of a request is raised as one of these
"""
from typing import Optional


class OpenSeaError(Exception):
    """Base class for all client errors"""


class TransportError(OpenSeaError):
    """The request never produced an HTTP response (DNS, connect, TLS, timeout)"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class ResponseError(OpenSeaError):
    """A response arrived but cannot be returned to the caller"""

    def __init__(self, message: str, status_code: int, body: str):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RequestNotSuccessfulError(ResponseError):
    """Non-2xx response whose body is the {"success": false} envelope"""

    def __init__(self, status_code: int, body: str):
        super().__init__("request not successful", status_code, body)


class UnexpectedResponseError(ResponseError):
    """Non-2xx response with a body that is not a failure envelope"""

    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"backend returns status {status_code} msg: {body}", status_code, body
        )


class ResponseDecodeError(ResponseError, ValueError):
    """2xx response whose payload does not match the expected shape"""

    def __init__(self, status_code: int, body: str, reason: str):
        super().__init__(f"cannot decode response: {reason}", status_code, body)
