"""Error hierarchy for asminclude."""

from __future__ import annotations

from typing import Any

__all__ = [
    "AsmIncludeError",
    "ConfigNotFoundError",
    "ConfigError",
    "ManifestError",
    "CoordinateError",
    "DescriptorNotFoundError",
    "DescriptorParseError",
    "ErrorCodes",
]


class AsmIncludeError(Exception):
    """Base error for all asminclude errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(AsmIncludeError):
    """Raised when a configuration or manifest file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(AsmIncludeError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class ManifestError(AsmIncludeError):
    """Raised when a dependency manifest is malformed."""

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            code="MANIFEST_INVALID",
            message=message,
            details={"errors": errors or []},
            **kwargs,
        )

    @property
    def errors(self) -> list[dict[str, Any]]:
        """Field-level validation errors, one dict per problem."""
        return self.details["errors"]


class CoordinateError(AsmIncludeError):
    """Raised when a canonical coordinate string cannot be split."""

    def __init__(self, coordinate: str, **kwargs: Any) -> None:
        super().__init__(
            code="COORDINATE_INVALID",
            message=f"Not a groupId:artifactId[:classifier] coordinate: {coordinate!r}",
            details={"coordinate": coordinate},
            **kwargs,
        )


class DescriptorNotFoundError(AsmIncludeError):
    """Raised when an assembly descriptor file cannot be found."""

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(
            code="DESCRIPTOR_NOT_FOUND",
            message=f"Assembly descriptor not found: {path}",
            details={"path": path},
            **kwargs,
        )


class DescriptorParseError(AsmIncludeError):
    """Raised when an assembly descriptor is not well-formed XML."""

    def __init__(self, message: str, source: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="DESCRIPTOR_PARSE_ERROR",
            message=message,
            details={"source": source},
            **kwargs,
        )


class ErrorCodes:
    """All error code constants."""

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    MANIFEST_INVALID = "MANIFEST_INVALID"
    COORDINATE_INVALID = "COORDINATE_INVALID"
    DESCRIPTOR_NOT_FOUND = "DESCRIPTOR_NOT_FOUND"
    DESCRIPTOR_PARSE_ERROR = "DESCRIPTOR_PARSE_ERROR"
