"""Turns router options into HTTP requests and service responses into routers."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import httpx
from pydantic import ValidationError

from openstack_neutron.domain.exceptions import (
    MalformedResponseError,
    NeutronApiError,
    RouterConflictError,
    RouterNotFoundError,
    RouterValidationError,
    ServiceUnavailableError,
)
from openstack_neutron.domain.models import RequestKind, Router, RouterOptions
from openstack_neutron.utils import validators

from .config import NeutronConfig


class RouterRequestFactory:
    """Builds ``httpx.Request`` objects for router create and update calls.

    The options' :class:`RequestKind` picks the verb and target: creates are
    POSTed to the collection, updates are PUT to the member URL.
    """

    def __init__(
        self,
        config: NeutronConfig | None = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config or NeutronConfig()
        self.logger = logger or logging.getLogger(
            f"{__name__}.{self.__class__.__name__}"
        )

    @property
    def routers_url(self) -> str:
        return self.config.routers_url

    def router_url(self, router_id: str) -> str:
        return f"{self.routers_url}/{validators.quote_router_id(router_id)}"

    def build(
        self, options: RouterOptions, router_id: str | None = None
    ) -> httpx.Request:
        options = self._apply_defaults(options)
        validators.validate_options(
            options, require_name=self.config.require_name_on_create
        )

        if options.kind is RequestKind.CREATE:
            if router_id is not None:
                raise RouterValidationError(
                    "router id must not be given for create requests",
                    context={"router_id": router_id},
                )
            url = self.routers_url
        else:
            url = self.router_url(router_id or "")

        request = httpx.Request(
            options.kind.http_method,
            url,
            json=options.to_request_body(),
            headers={"Accept": "application/json"},
            extensions={"timeout": httpx.Timeout(self.config.timeout_seconds).as_dict()},
        )
        self.logger.debug(
            "router_request_built",
            extra={"method": request.method, "url": str(request.url)},
        )
        return request

    def create(self, options: RouterOptions) -> httpx.Request:
        if not options.is_create:
            raise RouterValidationError(
                "create requires create options", context={"kind": options.kind.value}
            )
        return self.build(options)

    def update(self, router_id: str, options: RouterOptions) -> httpx.Request:
        if not options.is_update:
            raise RouterValidationError(
                "update requires update options", context={"kind": options.kind.value}
            )
        return self.build(options, router_id)

    def parse_router_response(self, response: httpx.Response) -> Router:
        data = self._checked_json(response)
        payload = data.get("router")
        if not isinstance(payload, dict):
            raise MalformedResponseError(
                "response has no router object", context={"data": data}
            )
        return self._decode(payload)

    def parse_routers_response(self, response: httpx.Response) -> Tuple[Router, ...]:
        data = self._checked_json(response)
        payload = data.get("routers")
        if not isinstance(payload, list):
            raise MalformedResponseError(
                "response has no routers list", context={"data": data}
            )
        return tuple(self._decode(item) for item in payload)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _apply_defaults(self, options: RouterOptions) -> RouterOptions:
        tenant = self.config.default_tenant_id
        if tenant is None or not options.is_create:
            return options
        # an explicit tenant, even an empty one, is left to the service
        if options.router.tenant_id is not None:
            return options
        router = options.router.model_copy(update={"tenant_id": tenant})
        return options.model_copy(update={"router": router})

    def _checked_json(self, response: httpx.Response) -> Dict[str, Any]:
        status = response.status_code
        if not response.is_success:
            extra: Dict[str, Any] = {"status_code": status}
            if self._has_request(response):
                extra["url"] = str(response.request.url)
            self.logger.warning("router_response_error", extra=extra)
            raise self._error_for(status, self._error_body(response))

        try:
            data = response.json() if response.content else {}
        except ValueError as exc:
            raise MalformedResponseError(
                "response body is not JSON", context={"status_code": status}
            ) from exc
        if not isinstance(data, dict):
            raise MalformedResponseError(
                "response body is not an object", context={"status_code": status}
            )
        return data

    @staticmethod
    def _error_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _error_for(status: int, data: Any) -> NeutronApiError:
        message = None
        if isinstance(data, dict):
            error = data.get("NeutronError")
            if isinstance(error, dict):
                message = error.get("message")
            elif isinstance(error, str):
                message = error
        if status == 404:
            return RouterNotFoundError(message, status_code=status)
        if status == 409:
            return RouterConflictError(message, status_code=status)
        if status >= 500:
            return ServiceUnavailableError(message, status_code=status)
        return NeutronApiError(message, status_code=status)

    @staticmethod
    def _decode(payload: Dict[str, Any]) -> Router:
        try:
            return Router.from_wire(payload)
        except ValidationError as exc:
            raise MalformedResponseError(
                "router payload failed validation", context={"data": payload}
            ) from exc

    @staticmethod
    def _has_request(response: httpx.Response) -> bool:
        try:
            response.request
        except RuntimeError:
            return False
        return True
