"""Domain value objects for the Neutron router resource."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NetworkStatus(str, Enum):
    """Operational status reported by the networking service."""

    ACTIVE = "ACTIVE"
    DOWN = "DOWN"
    BUILD = "BUILD"
    ERROR = "ERROR"
    UNRECOGNIZED = "UNRECOGNIZED"

    @classmethod
    def _missing_(cls, value: object) -> "NetworkStatus":
        if isinstance(value, str):
            for member in cls:
                if member.value == value.upper():
                    return member
        return cls.UNRECOGNIZED


class _WireModel(BaseModel):
    # attribute names double as the service's snake_case wire names
    model_config = ConfigDict(frozen=True)

    def to_wire(self) -> Dict[str, Any]:
        """Dump using wire field names, leaving out unset values."""

        return self.model_dump(mode="json", exclude_none=True)


class IP(_WireModel):
    """Fixed IP allocated on a subnet."""

    ip_address: Optional[str] = None
    subnet_id: Optional[str] = None


class ExternalGatewayInfo(_WireModel):
    """How a router is attached to an external network."""

    network_id: Optional[str] = None
    enable_snat: Optional[bool] = None
    external_fixed_ips: Optional[Tuple[IP, ...]] = None


class Router(_WireModel):
    """Immutable view of a Neutron router.

    Every field is optional: ``id`` and ``status`` are assigned by the service
    and stay ``None`` on routers synthesised for outgoing requests.
    """

    id: Optional[str] = None
    status: Optional[NetworkStatus] = None
    name: Optional[str] = None
    tenant_id: Optional[str] = None
    admin_state_up: Optional[bool] = None
    external_gateway_info: Optional[ExternalGatewayInfo] = None

    @field_validator("status", mode="before")
    @classmethod
    def coerce_status(cls, value: Any) -> Any:
        if value is None or isinstance(value, NetworkStatus):
            return value
        return NetworkStatus(value)

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> "Router":
        """Decode a service payload, with or without the ``router`` envelope."""

        if isinstance(payload.get("router"), Mapping):
            payload = payload["router"]
        return cls.model_validate(payload)

    @classmethod
    def create_options(cls) -> "RouterOptionsBuilder":
        return RouterOptionsBuilder(RequestKind.CREATE)

    @classmethod
    def update_options(cls) -> "RouterOptionsBuilder":
        return RouterOptionsBuilder(RequestKind.UPDATE)


class RequestKind(str, Enum):
    """Which service call a set of router options is meant for."""

    CREATE = "create"
    UPDATE = "update"

    @property
    def http_method(self) -> str:
        return "POST" if self is RequestKind.CREATE else "PUT"


class RouterOptions(BaseModel):
    """Router fields tagged with the request they were built for."""

    model_config = ConfigDict(frozen=True)

    kind: RequestKind
    router: Router = Field(default_factory=Router)

    @property
    def is_create(self) -> bool:
        return self.kind is RequestKind.CREATE

    @property
    def is_update(self) -> bool:
        return self.kind is RequestKind.UPDATE

    def to_request_body(self) -> Dict[str, Any]:
        return {"router": self.router.to_wire()}


class RouterOptionsBuilder:
    """Fluent accumulator for the client-settable router fields."""

    def __init__(self, kind: RequestKind) -> None:
        self.kind = RequestKind(kind)
        self._fields: Dict[str, Any] = {}

    def name(self, name: Optional[str]) -> "RouterOptionsBuilder":
        self._fields["name"] = name
        return self

    def tenant_id(self, tenant_id: Optional[str]) -> "RouterOptionsBuilder":
        self._fields["tenant_id"] = tenant_id
        return self

    def admin_state_up(self, admin_state_up: bool) -> "RouterOptionsBuilder":
        self._fields["admin_state_up"] = admin_state_up
        return self

    def external_gateway_info(
        self, external_gateway_info: ExternalGatewayInfo | Mapping[str, Any] | None
    ) -> "RouterOptionsBuilder":
        self._fields["external_gateway_info"] = external_gateway_info
        return self

    def build(self) -> RouterOptions:
        return RouterOptions(kind=self.kind, router=Router(**self._fields))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value!r}, fields={self._fields!r})"
