"""rekey: rename a top-level key in JSON request bodies.

A request stage for reverse proxies and web applications. JSON object bodies
carrying ``old_key`` are forwarded with the value moved under ``new_key``;
every other request is forwarded unchanged.
"""

from __future__ import annotations

from rekey.config import RekeyConfig, RenameConfig, create_config
from rekey.core import Outcome, RewriteResult, rewrite_body, should_rewrite
from rekey.http import HTTPRequest
from rekey.middleware import BodyKeyRenamer, new

__all__ = [
    "BodyKeyRenamer",
    "HTTPRequest",
    "Outcome",
    "RekeyConfig",
    "RenameConfig",
    "RewriteResult",
    "create_config",
    "new",
    "rewrite_body",
    "should_rewrite",
]
