"""Exception hierarchy for Neutron client failures."""

from __future__ import annotations

from typing import Any, Mapping


class NeutronError(Exception):
    """Base class for all errors raised by this package."""

    default_message = "Neutron client error occurred"

    def __init__(
        self, message: str | None = None, *, context: Mapping[str, Any] | None = None
    ):
        self.message = message or self.default_message
        self.context: Mapping[str, Any] = dict(context or {})
        formatted = self._format_message()
        super().__init__(formatted)

    def _format_message(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


class RouterValidationError(NeutronError):
    """Router options failed a client-side check."""

    default_message = "Router options failed validation"


class NeutronApiError(NeutronError):
    """The networking service answered with a non-success status."""

    default_message = "Neutron request failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        context: Mapping[str, Any] | None = None,
    ):
        self.status_code = status_code
        merged = dict(context or {})
        if status_code is not None:
            merged.setdefault("status_code", status_code)
        super().__init__(message, context=merged)


class RouterNotFoundError(NeutronApiError):
    """Requested router does not exist."""

    default_message = "Router not found"


class RouterConflictError(NeutronApiError):
    """Service refused the change because of conflicting state."""

    default_message = "Router request conflicts with current state"


class ServiceUnavailableError(NeutronApiError):
    """Service is down or failed internally."""

    default_message = "Neutron service is unavailable"


class MalformedResponseError(NeutronError):
    """Response body could not be decoded into a router."""

    default_message = "Malformed Neutron response"
