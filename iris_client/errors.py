from __future__ import annotations

from typing import Sequence


class ClientError(Exception):
    """Base class for every failure surfaced by a prediction round-trip."""

    kind = "client"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ClientError):
    """One or more feature fields cannot be sent; detected before any request."""

    kind = "validation"

    def __init__(self, fields: Sequence[str], reason: str = "must be a number") -> None:
        self.fields = tuple(fields)
        self.reason = reason
        names = ", ".join(self.fields)
        super().__init__(f"Invalid input: {names} {reason}")


class NetworkError(ClientError):
    kind = "network"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Could not reach prediction service: {detail}")


class HttpError(ClientError):
    kind = "http"

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Request failed: {status_code}")


class DecodeError(ClientError):
    kind = "decode"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Unexpected response from prediction service: {detail}")


__all__ = ["ClientError", "DecodeError", "HttpError", "NetworkError", "ValidationError"]
