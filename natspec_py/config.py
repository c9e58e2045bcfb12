"""
natspec_py.config — output formatting, loader limits and logging level.

NO third-party deps; safe to import very early.

Configuration precedence:
  1) Environment variables (NATSPEC_* / NATSPEC_PY_*)
  2) Hardcoded defaults below

Key env vars (case-insensitive where boolean):
  - NATSPEC_DOC_INDENT          (int)   default: 2       indentation of user/dev docs
  - NATSPEC_LOG_LEVEL           (str)   default: WARNING level used by the CLI
  - NATSPEC_STRICT_SCHEMA       (bool)  default: true    JSON-Schema check of descriptor files
  - NATSPEC_MAX_COMMENT_BYTES   (int)   default: 65_536  largest accepted comment (UTF-8 bytes)

Usage:
    from natspec_py.config import load_config
    cfg = load_config()
    if cfg.strict_schema: ...
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Optional


# ----------------------------- helpers ---------------------------------------


def _env_raw(name: str) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None:
        # Secondary prefix (legacy)
        raw = os.getenv(name.replace("NATSPEC_", "NATSPEC_PY_", 1))
    return raw


def _env_bool(name: str, default: bool) -> bool:
    raw = _env_raw(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    return val in ("1", "true", "t", "yes", "y", "on")


def _env_int(name: str, default: int, *, min_v: int, max_v: int) -> int:
    raw = _env_raw(name)
    if raw is None:
        return default
    try:
        v = int(raw, 0)
    except ValueError:
        return default
    if v < min_v:
        return min_v
    if v > max_v:
        return max_v
    return v


def _env_log_level(name: str, default: str) -> str:
    raw = (_env_raw(name) or default).strip().upper()
    if isinstance(logging.getLevelName(raw), int):
        return raw
    return default


# ------------------------------- config --------------------------------------


@dataclass(frozen=True)
class DocgenConfig:
    doc_indent: int
    log_level: str
    strict_schema: bool
    max_comment_bytes: int

    def as_dict(self) -> Dict[str, Any]:
        return {
            "doc_indent": self.doc_indent,
            "log_level": self.log_level,
            "strict_schema": self.strict_schema,
            "max_comment_bytes": self.max_comment_bytes,
        }


@lru_cache(maxsize=1)
def load_config() -> DocgenConfig:
    """
    Build and cache a DocgenConfig from environment + defaults.
    Call ``load_config.cache_clear()`` after changing the environment.
    """
    return DocgenConfig(
        doc_indent=_env_int("NATSPEC_DOC_INDENT", 2, min_v=0, max_v=8),
        log_level=_env_log_level("NATSPEC_LOG_LEVEL", "WARNING"),
        strict_schema=_env_bool("NATSPEC_STRICT_SCHEMA", True),
        max_comment_bytes=_env_int(
            "NATSPEC_MAX_COMMENT_BYTES", 65_536, min_v=256, max_v=16_777_216
        ),
    )


__all__ = ["DocgenConfig", "load_config"]
