import json

import pytest

from listener_inspector_mcp.configdump.extractor import retrieve_sorted_listeners
from listener_inspector_mcp.configdump.render import (
    format_table,
    render_listener_dump,
    render_listener_summary,
)
from listener_inspector_mcp.core.errors import RenderError
from listener_inspector_mcp.core.models import Listener


def test_format_table_aligns_columns():
    out = format_table([["A", "BB", "C"], ["long", "1", "x"]])
    assert out == "A        BB     C\nlong     1      x\n"


def test_summary_of_scenario(scenario_dump):
    out = render_listener_summary(retrieve_sorted_listeners(scenario_dump))
    lines = out.splitlines()
    assert lines[0].split() == ["ADDRESS", "PORT", "TYPE"]
    assert lines[1].split() == ["10.0.0.1", "8080", "HTTP"]
    assert lines[2].split() == ["10.0.0.2", "9000", "TCP"]
    assert lines[0].index("PORT") == lines[1].index("8080") == lines[2].index("9000")


def test_summary_header_only():
    assert render_listener_summary([]) == "ADDRESS     PORT     TYPE\n"


def test_dump_keeps_every_field(scenario_dump):
    listeners = retrieve_sorted_listeners(scenario_dump)
    out = render_listener_dump(listeners)
    assert out.endswith("]\n")
    assert '\n    {\n        "' in out

    decoded = json.loads(out)
    assert decoded[0]["name"] == "10.0.0.1_8080"
    assert decoded[1]["filter_chains"][0]["filters"][0]["typed_config"]["cluster"].startswith("outbound|9000")
    assert all("@type" not in d for d in decoded)


def test_dump_failure_is_render_error():
    listener = Listener(name="x", address=None, filter_chains=[], raw={"bad": object()})
    with pytest.raises(RenderError, match="failed to marshal listeners"):
        render_listener_dump([listener])
