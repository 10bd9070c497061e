"""
Structured Logging (structlog).

Every logger returned by get_logger() wraps a stdlib logger in the
"cloudphone" namespace. A host that loads the plugin therefore receives the
events through its own logging setup, and nothing is printed when the host
configured none. Only the standalone CLI calls setup_logging(), which
attaches a stderr handler to that namespace.
"""

import logging
import re
import sys

import structlog

from cloudphone_config.settings import Settings

LOGGER_NAMESPACE = "cloudphone"

# JSON-serialized payloads may carry credentials: `"sshPwd": "..."`, either
# directly or inside a JSON string such as a tool result's text item.
_SECRET_FIELD = re.compile(r'("(?:sshPwd|token)"\s*:\s*)"(?:[^"\\]|\\.)*"')
_ESCAPED_SECRET_FIELD = re.compile(r'(\\"(?:sshPwd|token)\\"\s*:\s*)\\"(?:[^"\\]|\\[^"])*\\"')


def mask_secrets(text: str) -> str:
    """Replace secret string values in a JSON text with "***"."""
    text = _ESCAPED_SECRET_FIELD.sub(r'\1\\"***\\"', text)
    return _SECRET_FIELD.sub(r'\1"***"', text)


def setup_logging(settings: Settings) -> None:
    """
    Route plugin events to stderr (CLI use only).

    Output format: JSON (default) or text (dev)
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    namespace_logger.handlers[:] = [handler]
    namespace_logger.setLevel(settings.LOG_LEVEL.upper())
    namespace_logger.propagate = False

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.LOG_FORMAT == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by `cloudphone.<name>` in stdlib logging."""
    return structlog.wrap_logger(
        logging.getLogger(f"{LOGGER_NAMESPACE}.{name}"),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
