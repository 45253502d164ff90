import json

from listener_inspector_mcp.core.registry import DEFAULT_CAPABILITIES
from listener_inspector_mcp.core.server import ListenerMCPServer


def test_summary_before_any_load():
    server = ListenerMCPServer(capability_imports=DEFAULT_CAPABILITIES)
    assert server.listener_summary() == "error: config writer has not been primed"
    assert server.store.info() == {"primed": False}


def test_summary_and_dump_after_load(tmp_path, scenario_dump):
    path = tmp_path / "dump.json"
    path.write_text(json.dumps(scenario_dump))
    server = ListenerMCPServer(capability_imports=DEFAULT_CAPABILITIES)
    assert server.registry.get("file_dump").load(str(path)).startswith("config dump loaded")

    summary = server.listener_summary(type="tcp")
    assert [l.split() for l in summary.splitlines()] == [
        ["ADDRESS", "PORT", "TYPE"],
        ["10.0.0.2", "9000", "TCP"],
    ]

    dumped = json.loads(server.listener_dump(port=8080))
    assert [d["name"] for d in dumped] == ["10.0.0.1_8080"]


def test_empty_snapshot_reports_error(make_dump):
    server = ListenerMCPServer(capability_imports=DEFAULT_CAPABILITIES)
    server.store.prime(make_dump(), source="test")
    assert server.listener_dump() == "error: no listeners found"
