"""Build a router create request and decode a canned service reply."""

import httpx

from openstack_neutron import ExternalGatewayInfo, NeutronConfig, Router, RouterRequestFactory


def main() -> None:
    factory = RouterRequestFactory(NeutronConfig.from_env())
    options = (
        Router.create_options()
        .name("edge-router")
        .admin_state_up(True)
        .external_gateway_info(ExternalGatewayInfo(network_id="public", enable_snat=True))
        .build()
    )

    request = factory.create(options)
    print("Request:", request.method, request.url)
    print("Body:", request.content.decode())

    reply = httpx.Response(
        201,
        json={"router": dict(options.to_request_body()["router"], id="r-1", status="BUILD")},
    )
    print("Router:", factory.parse_router_response(reply))


if __name__ == "__main__":
    main()
