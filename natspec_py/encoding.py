"""
JSON tree type and the two writers used for generated artifacts.

Renderers build plain trees of dict / list / str / bool nodes; only the
writers here know how they turn into text:

- compact_json_str: no whitespace, sorted keys (ABI; deterministic for
  hashing and machine consumption)
- styled_json_str: indented, sorted keys (user/dev docs; read by people)

Both end with a newline so artifacts are well-formed text files.
"""
from __future__ import annotations

import json
from typing import Dict, Final, List, Union

JsonNode = Union[Dict[str, "JsonNode"], List["JsonNode"], str, bool]

_JSON_SEPARATORS: Final[tuple[str, str]] = (",", ":")


def compact_json_str(obj: JsonNode) -> str:
    """
    Serialize a tree to a canonical JSON line:
    - UTF-8 safe, no whitespace, sorted keys
    - stable across platforms and Python versions
    """
    return (
        json.dumps(
            obj,
            ensure_ascii=False,
            sort_keys=True,
            separators=_JSON_SEPARATORS,
            allow_nan=False,
        )
        + "\n"
    )


def styled_json_str(obj: JsonNode, *, indent: int = 2) -> str:
    """Indented JSON with sorted keys for documents meant for direct reading."""
    return (
        json.dumps(
            obj,
            ensure_ascii=False,
            sort_keys=True,
            indent=indent,
            allow_nan=False,
        )
        + "\n"
    )


__all__ = ["JsonNode", "compact_json_str", "styled_json_str"]
