"""Domain errors – invalid caller input for the cache layer."""

from __future__ import annotations

from typing import Any

from tagcache.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a caller violates a cache contract."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidTagSetError(ValidationError):
    """A tagged cache was constructed without any tag, or with an unusable one."""

    default_code = "invalid_tag_set"

    def __init__(
        self,
        message: str = "At least one tag should be provided.",
        *,
        reason: str = "empty",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, errors=[{"field": "tags", "reason": reason}], **kwargs)


class InvalidTtlError(ValidationError):
    """A ttl is not a positive number of seconds."""

    default_code = "invalid_ttl"

    def __init__(self, ttl: Any, **kwargs: Any) -> None:
        super().__init__(
            f"TTL must be a positive number of seconds, got {ttl!r}",
            errors=[{"field": "ttl", "value": repr(ttl)}],
            **kwargs,
        )
        self.ttl = ttl


__all__ = [
    "DomainError",
    "InvalidTagSetError",
    "InvalidTtlError",
    "ValidationError",
]
