"""
Logging helpers: identity/role tagging and per-thread log context.

Log lines look like:

    2026-10-19 12:00:00 INFO [Add Binding] [Workflow] [slider=2] Bound firefox

The identity/role tags are derived from the module naming convention
(<name>_comp, <name>_wf, <name>_svc, ...), so every module only needs
``logger = logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import Any

LOG_FORMAT = "%(asctime)s %(levelname)s %(mixdeck_identity_tag)s %(mixdeck_role_tag)s %(context_str)s%(message)s"

# Module suffix -> role tag
_ROLE_SUFFIXES: dict[str, str] = {
    "_comp": "Component",
    "_wf": "Workflow",
    "_svc": "Service",
    "_helper": "Helper",
    "_dto": "DTO",
    "_cli": "CLI",
}

_context = threading.local()


def set_log_context(**values: Any) -> None:
    """Attach key=value pairs to every log line emitted from the current thread."""
    current = getattr(_context, "values", None)
    if current is None:
        current = {}
        _context.values = current
    current.update(values)


def clear_log_context() -> None:
    """Drop all context values for the current thread."""
    _context.values = {}


def get_log_context() -> dict[str, Any]:
    return dict(getattr(_context, "values", None) or {})


def _derive_tags(name: str) -> tuple[str, str]:
    leaf = name.rsplit(".", 1)[-1]
    for suffix, role in _ROLE_SUFFIXES.items():
        if leaf.endswith(suffix):
            stem = leaf[: -len(suffix)]
            if not stem:
                break
            identity = " ".join(part.capitalize() for part in stem.split("_") if part)
            return f"[{identity}]", f"[{role}]"
    return name, ""


class MixdeckLogFilter(logging.Filter):
    """
    Adds ``mixdeck_identity_tag``, ``mixdeck_role_tag`` and ``context_str`` to records.

    Never suppresses a record and never raises.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            identity, role = _derive_tags(str(record.name or ""))
        except Exception:
            identity, role = str(getattr(record, "name", "")), ""
        record.mixdeck_identity_tag = identity
        record.mixdeck_role_tag = role

        context = get_log_context()
        if context:
            pairs = " ".join(f"{k}={v}" for k, v in context.items())
            record.context_str = f"[{pairs}] "
        else:
            record.context_str = ""
        return True


def configure_logging(level: int = logging.INFO) -> None:
    """Configure the root logger with a console handler carrying MixdeckLogFilter."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(MixdeckLogFilter())  # Filter must be on handler, not logger

    # force=True clears handlers installed by earlier calls
    logging.basicConfig(level=level, handlers=[handler], force=True)
