"""Domain-specific exceptions."""

from __future__ import annotations


class ServiceError(Exception):
    pass


class SourceLoadError(ServiceError):
    """The translation source could not be read or parsed."""

    def __init__(self, message: str, *, location: str | None = None, cause: BaseException | None = None) -> None:
        super().__init__(message if location is None else f"{message} {location}")
        self.location = location
        self.cause = cause


class InvalidConfigurationError(ServiceError, ValueError):
    pass


__all__ = ["ServiceError", "SourceLoadError", "InvalidConfigurationError"]
