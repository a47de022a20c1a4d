"""
Domain exceptions raised by the alias store and mapped to envelopes by the handlers.
"""


class URLShortenerException(Exception):
    """Base exception for URL shortener service."""
    pass


class AliasExistsError(URLShortenerException):
    """Raised when a mapping with the same alias is already stored."""

    def __init__(self, alias: str):
        self.alias = alias
        super().__init__(f"Alias '{alias}' already exists")


class AliasNotFoundError(URLShortenerException):
    """Raised when no mapping exists for an alias."""

    def __init__(self, alias: str):
        self.alias = alias
        super().__init__(f"Alias '{alias}' not found")


class StorageError(URLShortenerException):
    """Raised when the backing database fails for any other reason."""

    def __init__(self, op: str, original_error: Exception = None):
        self.op = op
        self.original_error = original_error
        super().__init__(f"{op}: {original_error}")
