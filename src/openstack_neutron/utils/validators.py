"""Input validation helpers used before building requests."""

from __future__ import annotations

from urllib.parse import quote

from openstack_neutron.domain.exceptions import RouterValidationError
from openstack_neutron.domain.models import RouterOptions


def validate_router_id(router_id: str | None) -> str:
    if router_id is None or not router_id.strip():
        raise RouterValidationError("router id is required for updates")
    router_id = router_id.strip()
    if router_id in {".", ".."}:
        raise RouterValidationError(
            "router id must not be a dot segment", context={"router_id": router_id}
        )
    return router_id


def quote_router_id(router_id: str | None) -> str:
    """Validate a router id and escape it as a single URL path segment."""

    return quote(validate_router_id(router_id), safe="")


def validate_options(options: RouterOptions, *, require_name: bool = False) -> None:
    router = options.router
    if router.id is not None or router.status is not None:
        raise RouterValidationError(
            "id and status are assigned by the service",
            context={"kind": options.kind.value},
        )
    if require_name and options.is_create and not (router.name or "").strip():
        raise RouterValidationError("router name is required on create")
