from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import orjson

from .bootstrap import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hebrew calendar assistant command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("chat", help="Chat with the calendar assistant in the terminal.")

    call_parser = subparsers.add_parser("call", help="Invoke a single calendar tool and print its JSON result.")
    call_parser.add_argument("tool", help="Tool name, e.g. convertDate.")
    call_parser.add_argument("arguments", nargs="?", default="{}", help="JSON object of tool arguments.")

    api_parser = subparsers.add_parser("api", help="Start the FastAPI server exposing the calendar tools.")
    api_parser.add_argument("--host", default="127.0.0.1")
    api_parser.add_argument("--port", type=int, default=8000)

    mcp_parser = subparsers.add_parser("mcp", help="Start the FastMCP server for tool-calling clients.")
    mcp_parser.add_argument("--host", default="127.0.0.1")
    mcp_parser.add_argument("--port", type=int, default=8765)

    return parser


def run_chat() -> None:
    from .orchestrator import ChatOrchestrator, ChatSession

    orchestrator = ChatOrchestrator()
    session = ChatSession()
    while True:
        try:
            user_input = input("You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if not user_input:
            continue
        print("\nAssistant: ", end="", flush=True)
        for delta in orchestrator.stream_reply(session, user_input):
            print(delta, end="", flush=True)
        print("\n")


def run_call(tool: str, raw_arguments: str) -> int:
    from .api import call_api

    try:
        arguments = orjson.loads(raw_arguments)
    except orjson.JSONDecodeError as exc:
        print(f"Arguments must be a JSON object: {exc}", file=sys.stderr)
        return 2
    if not isinstance(arguments, dict):
        print("Arguments must be a JSON object.", file=sys.stderr)
        return 2
    try:
        result = call_api(tool, **arguments)
    except (KeyError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print(orjson.dumps(result, option=orjson.OPT_INDENT_2).decode("utf-8"))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()
    logging.getLogger(__name__).info("Luach agent CLI starting: %s", args.command)

    if args.command == "chat":
        run_chat()
    elif args.command == "call":
        return run_call(args.tool, args.arguments)
    elif args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
    elif args.command == "mcp":
        from .services.mcp import run_mcp_server

        run_mcp_server(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
