"""External API adapters and the fetch error taxonomy."""

from __future__ import annotations


class FetchError(RuntimeError):
    """Terminal failure of a single weather fetch."""

    code = "FETCH_ERROR"

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FetchError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class NetworkError(FetchError):
    """Transport failure: DNS, refused connection, timeout."""

    code = "NETWORK_ERROR"


class ProviderError(FetchError):
    """Provider reachable but rejected the query or answered with plain text."""

    code = "PROVIDER_ERROR"


class MalformedResponse(FetchError):
    """Provider answered with JSON that does not match the timeline schema."""

    code = "MALFORMED_RESPONSE"


class MissingApiKey(FetchError):
    code = "MISSING_API_KEY"
