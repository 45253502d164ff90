from listener_inspector_mcp.core.registry import CapabilityRegistry


def test_load_all_capabilities():
    reg = CapabilityRegistry()
    reg.load_from_import_paths(
        [
            "listener_inspector_mcp.capabilities.file_dump.capability:build_capability",
        ]
    )

    names = reg.list()
    assert "file_dump" in names
    assert reg.get("file_dump").status()["loaded"] == 0
