"""Logger configuration for the ``rekey`` logger hierarchy."""

from __future__ import annotations

import logging
import sys

from rekey.config.models import LoggingConfig
from rekey.logging.formatters import JSONFormatter

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Marks handlers installed here so reconfiguring replaces rather than stacks them.
_HANDLER_ATTR = "_rekey_handler"


def configure_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Attach a handler to the ``rekey`` logger according to ``config``.

    Calling this again replaces the handler installed by the previous call;
    handlers added by the host application are left alone.
    """
    config = config or LoggingConfig()
    root = logging.getLogger("rekey")

    for existing in list(root.handlers):
        if getattr(existing, _HANDLER_ATTR, False):
            root.removeHandler(existing)
            existing.close()

    if config.output:
        handler: logging.Handler = logging.FileHandler(config.output, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    if config.format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)
    root.setLevel(config.level)
    return root
