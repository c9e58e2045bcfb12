"""
natspec_py.schemas
------------------

Package data loader for the JSON Schemas shipped with natspec_py:

- contract_descriptor.schema.json  (input accepted by natspec_py.loader)

Resources are read through `importlib.resources`, so they resolve from
wheels and zip imports without assuming a working directory.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib.resources import files as _files
from typing import Any, Dict, List

_JSON_SCHEMAS: Dict[str, str] = {
    "contract_descriptor": "contract_descriptor.schema.json",
}


def list_json_schemas() -> List[str]:
    """Return the list of available JSON-Schema logical names."""
    return sorted(_JSON_SCHEMAS.keys())


@lru_cache(maxsize=None)
def load_json_schema(name: str) -> Dict[str, Any]:
    """
    Load and parse a JSON-Schema by logical name.

    Raises KeyError for unknown names.
    """
    relpath = _JSON_SCHEMAS[name]
    return json.loads((_files(__name__) / relpath).read_text(encoding="utf-8"))


__all__ = ["list_json_schemas", "load_json_schema"]
