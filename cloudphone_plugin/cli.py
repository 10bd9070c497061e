"""Diagnostic CLI.

Runs a tool outside a host, through the same executor adapter the host
would use, and prints the envelope text.

Usage:
    cloudphone-plugin echo "hello"
    cloudphone-plugin link 7593283098889067310 --timeout-ms 3000
"""

import argparse
import asyncio
import json
import sys
import uuid

from cloudphone_config.settings import PluginConfig, Settings
from cloudphone_obs.logging import setup_logging
from cloudphone_tools import ToolExecutor, ToolResult, build_registry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cloudphone-plugin")
    subparsers = parser.add_subparsers(dest="command", required=True)

    echo = subparsers.add_parser("echo", help="Echo text through the tool chain")
    echo.add_argument("text")

    link = subparsers.add_parser("link", help="Get a device connection link")
    link.add_argument("device_id")
    link.add_argument("--base-url", default=None)
    link.add_argument("--token", default=None)
    link.add_argument("--timeout-ms", type=float, default=None)

    return parser


def _config_from_args(args: argparse.Namespace, settings: Settings) -> PluginConfig:
    config = settings.to_plugin_config()
    overrides = {
        "base_url": getattr(args, "base_url", None),
        "token": getattr(args, "token", None),
        "timeout_ms": getattr(args, "timeout_ms", None),
    }
    return config.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def _is_failure(result: ToolResult) -> bool:
    try:
        payload = json.loads(result.content[0].text)
    except ValueError:
        return False
    return isinstance(payload, dict) and payload.get("ok") is False


async def run(args: argparse.Namespace, settings: Settings) -> ToolResult:
    """Execute the selected tool and return its envelope."""
    registry = build_registry()
    executor = ToolExecutor(_config_from_args(args, settings))

    if args.command == "echo":
        tool, params = registry.get("echo"), {"text": args.text}
    else:
        tool, params = registry.get("get_device_connection_link"), {"deviceId": args.device_id}

    return await executor.execute(tool, f"cli-{uuid.uuid4()}", params)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    setup_logging(settings)

    result = asyncio.run(run(args, settings))
    for item in result.content:
        print(item.text)

    return 1 if _is_failure(result) else 0


if __name__ == "__main__":
    sys.exit(main())
