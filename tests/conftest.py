import pytest

from listener_inspector_mcp.configdump.extractor import LISTENER_TYPE_URL
from listener_inspector_mcp.core.capability_base import CapabilityContext
from listener_inspector_mcp.core.store import ConfigDumpStore

LISTENERS_DUMP_TYPE = "type.googleapis.com/envoy.admin.v3.ListenersConfigDump"
HCM_TYPE = "type.googleapis.com/envoy.extensions.filters.network.http_connection_manager.v3.HttpConnectionManager"
TCP_PROXY_TYPE = "type.googleapis.com/envoy.extensions.filters.network.tcp_proxy.v3.TcpProxy"


def _http_filter():
    return {
        "name": "envoy.http_connection_manager",
        "typed_config": {
            "@type": HCM_TYPE,
            "stat_prefix": "outbound_0.0.0.0_8080",
            "rds": {"route_config_name": "8080"},
        },
    }


def _tcp_filter(cluster="outbound|9000||db.default.svc.cluster.local"):
    return {
        "name": "envoy.tcp_proxy",
        "typed_config": {"@type": TCP_PROXY_TYPE, "stat_prefix": cluster, "cluster": cluster},
    }


def _listener(address, port, chains, type_url=LISTENER_TYPE_URL, name=None):
    return {
        "@type": type_url,
        "name": name or f"{address}_{port}",
        "address": {"socket_address": {"address": address, "port_value": port}},
        "filter_chains": [{"filters": filters} for filters in chains],
    }


def _config_dump(dynamic=(), static=()):
    return {
        "configs": [
            {"@type": "type.googleapis.com/envoy.admin.v3.BootstrapConfigDump", "bootstrap": {}},
            {
                "@type": LISTENERS_DUMP_TYPE,
                "dynamic_listeners": [
                    {"name": l["name"], "active_state": {"version_info": "1", "listener": l}}
                    for l in dynamic
                ],
                "static_listeners": [{"listener": l} for l in static],
            },
        ]
    }


@pytest.fixture
def http_filter():
    return _http_filter


@pytest.fixture
def tcp_filter():
    return _tcp_filter


@pytest.fixture
def make_listener():
    return _listener


@pytest.fixture
def make_dump():
    return _config_dump


@pytest.fixture
def scenario_dump():
    """
    One dynamic HTTP listener on 10.0.0.1:8080 and one static TCP listener on 10.0.0.2:9000.
    """
    return _config_dump(
        dynamic=[_listener("10.0.0.1", 8080, [[_http_filter()]])],
        static=[_listener("10.0.0.2", 9000, [[_tcp_filter()]])],
    )


@pytest.fixture
def store():
    return ConfigDumpStore()


@pytest.fixture
def ctx(store):
    lines = []
    c = CapabilityContext(store=store, log=lines.append)
    c.lines = lines
    return c
