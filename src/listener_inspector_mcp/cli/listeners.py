from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from listener_inspector_mcp.configdump.writer import ConfigWriter
from listener_inspector_mcp.core.errors import ConfigDumpError
from listener_inspector_mcp.core.classify import LISTENER_TYPES
from listener_inspector_mcp.core.filters import ListenerFilter


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="proxy-listeners",
        description="Summarize or dump the listeners of an Envoy config dump.",
    )
    p.add_argument("file", help="config dump JSON file, - reads stdin")
    p.add_argument("--address", default="", help="only listeners bound to this address")
    p.add_argument("--port", type=int, default=0, help="only listeners bound to this port")
    p.add_argument("--type", default="", help="only listeners of this type: " + ", ".join(LISTENER_TYPES))
    p.add_argument("-o", "--output", choices=["short", "json"], default="short")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """
    Example:
      curl -s localhost:15000/config_dump > dump.json
      python -m listener_inspector_mcp.cli.listeners dump.json --type http
    """
    args = build_parser().parse_args(argv)
    if args.port < 0:
        print("error: --port must not be negative", file=sys.stderr)
        return 1

    try:
        if args.file == "-":
            data = sys.stdin.buffer.read()
        else:
            with open(args.file, "rb") as fh:
                data = fh.read()
    except OSError as e:
        print(f"error: cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    listener_filter = ListenerFilter(address=args.address, port=args.port, type=args.type)
    writer = ConfigWriter(stdout=sys.stdout)
    try:
        writer.prime(data)
        if args.output == "json":
            writer.print_listener_dump(listener_filter)
        else:
            writer.print_listener_summary(listener_filter)
    except ConfigDumpError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
