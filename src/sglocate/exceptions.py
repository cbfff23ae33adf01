"""Custom exception hierarchy for sglocate."""


class SGLocateError(Exception):
    """Base exception for all sglocate errors."""


class InvalidSearchValue(SGLocateError):
    """The search value is empty once surrounding whitespace is removed."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Search value must not be empty: {value!r}")


class UpstreamError(SGLocateError):
    """The OneMap search service could not be reached or answered badly."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"OneMap request to {url} failed: {reason}")
