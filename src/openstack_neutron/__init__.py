"""Neutron router resource model, builders and request factory."""

from .core.config import NeutronConfig
from .core.request_factory import RouterRequestFactory
from .domain.models import (
    IP,
    ExternalGatewayInfo,
    NetworkStatus,
    RequestKind,
    Router,
    RouterOptions,
    RouterOptionsBuilder,
)

__all__ = [
    "IP",
    "ExternalGatewayInfo",
    "NetworkStatus",
    "NeutronConfig",
    "RequestKind",
    "Router",
    "RouterOptions",
    "RouterOptionsBuilder",
    "RouterRequestFactory",
    "domain",
    "core",
    "utils",
]
