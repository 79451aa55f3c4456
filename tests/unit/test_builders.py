import pytest
from pydantic import ValidationError

from openstack_neutron.domain.models import (
    ExternalGatewayInfo,
    RequestKind,
    Router,
    RouterOptions,
    RouterOptionsBuilder,
)


def test_empty_builder_builds_all_absent_options():
    options = Router.create_options().build()

    assert isinstance(options, RouterOptions)
    assert options.kind is RequestKind.CREATE
    assert options.router == Router()


def test_setters_are_fluent():
    builder = Router.create_options()

    assert builder.name("edge") is builder
    assert builder.tenant_id("t-1") is builder
    assert builder.admin_state_up(True) is builder
    assert builder.external_gateway_info(None) is builder


def test_last_write_wins():
    options = (
        Router.update_options()
        .name("first")
        .admin_state_up(True)
        .name("second")
        .admin_state_up(False)
        .build()
    )

    assert options.router.name == "second"
    assert options.router.admin_state_up is False


def test_setter_order_does_not_matter():
    forward = Router.create_options().name("edge").admin_state_up(True).build()
    reverse = Router.create_options().admin_state_up(True).name("edge").build()

    assert forward == reverse


def test_create_and_update_builders_share_fields_but_not_kind():
    gateway = ExternalGatewayInfo(network_id="ext-net", enable_snat=True)

    def configure(builder: RouterOptionsBuilder) -> RouterOptions:
        return (
            builder.name("edge")
            .tenant_id("t-1")
            .admin_state_up(True)
            .external_gateway_info(gateway)
            .build()
        )

    created = configure(Router.create_options())
    updated = configure(Router.update_options())

    assert created.router == updated.router
    assert created != updated
    assert created.is_create and not created.is_update
    assert updated.is_update and not updated.is_create
    assert created.kind.http_method == "POST"
    assert updated.kind.http_method == "PUT"


def test_built_options_are_isolated_from_later_setters():
    builder = Router.create_options().name("edge")
    first = builder.build()
    builder.name("other")

    assert first.router.name == "edge"
    assert builder.build().router.name == "other"


def test_gateway_mapping_is_coerced():
    options = (
        Router.create_options()
        .external_gateway_info({"network_id": "ext-net", "enable_snat": False})
        .build()
    )

    assert options.router.external_gateway_info == ExternalGatewayInfo(
        network_id="ext-net", enable_snat=False
    )


def test_request_body_uses_router_envelope():
    options = Router.create_options().name("edge").tenant_id("t-1").build()

    assert options.to_request_body() == {
        "router": {"name": "edge", "tenant_id": "t-1"}
    }


def test_options_are_immutable():
    options = Router.create_options().build()

    with pytest.raises((TypeError, ValidationError)):
        options.kind = RequestKind.UPDATE  # type: ignore[misc]


def test_builder_rejects_unknown_kind():
    with pytest.raises(ValueError):
        RouterOptionsBuilder("delete")  # type: ignore[arg-type]
