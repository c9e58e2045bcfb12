"""
Load a resolved contract descriptor from JSON.

The renderers work on natspec_py.model objects. Build tools usually have the
resolved contract as JSON (emitted by the front end that did inheritance and
type resolution); this module turns that JSON into a ContractDescription.

    {
      "name": "Token",
      "kind": "contract",
      "documentation": "@title Token\\n@author Alice",
      "constructor": {"inputs": [{"name": "supply", "type": "uint256"}]},
      "functions": [
        {"name": "transfer", "constant": false,
         "inputs": [{"name": "to", "type": "address"}, {"name": "value", "type": "uint256"}],
         "outputs": [{"name": "ok", "type": "bool"}],
         "documentation": "@notice Send tokens"}
      ],
      "events": [
        {"name": "Transfer", "anonymous": false,
         "inputs": [{"name": "from", "type": "address", "indexed": true}]}
      ]
    }

With NATSPEC_STRICT_SCHEMA on (default) the document is checked against
natspec_py/schemas/contract_descriptor.schema.json first.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import jsonschema

from .config import DocgenConfig, load_config
from .errors import DescriptorError
from .model import (
    ConstructorDescription,
    ContractDescription,
    EnumDescription,
    EventDescription,
    EventParameter,
    FunctionDescription,
    StructDescription,
    StructMember,
)
from .schemas import load_json_schema

log = logging.getLogger(__name__)

DescriptorLike = Union[str, Path, Mapping[str, Any]]


# --- Reading -----------------------------------------------------------------


def _parse_text(text: str) -> Dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DescriptorError(f"invalid descriptor JSON: {e}", cause=e) from e
    if not isinstance(data, dict):
        raise DescriptorError("descriptor root must be an object", path="$")
    return data


def read_descriptor(src: DescriptorLike) -> Dict[str, Any]:
    """
    Load descriptor JSON from a path, from JSON text (a string starting with
    ``{``), or return a shallow copy of a mapping.
    """
    if isinstance(src, str) and src.lstrip().startswith("{"):
        return _parse_text(src)
    if isinstance(src, (str, Path)):
        p = Path(src)
        try:
            text = p.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise DescriptorError(f"descriptor not found: {p}", cause=e) from e
        except UnicodeDecodeError as e:
            raise DescriptorError(f"descriptor {p} is not valid UTF-8", cause=e) from e
        except OSError as e:
            raise DescriptorError(f"cannot read descriptor {p}: {e.strerror or e}", cause=e) from e
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DescriptorError(f"invalid JSON in descriptor {p}: {e}", cause=e) from e
        if not isinstance(data, dict):
            raise DescriptorError("descriptor root must be an object", path="$")
        return data
    if isinstance(src, Mapping):
        return dict(src)
    raise DescriptorError(f"unsupported descriptor input: {type(src).__name__}")


def validate_descriptor(data: Mapping[str, Any]) -> None:
    """Check ``data`` against the packaged JSON Schema; raise DescriptorError on the first failure."""
    validator = jsonschema.Draft202012Validator(load_json_schema("contract_descriptor"))
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
    if not errors:
        return
    first = errors[0]
    path = "$" + "".join(f"[{p!r}]" if isinstance(p, int) else f".{p}" for p in first.absolute_path)
    raise DescriptorError(
        f"descriptor failed schema validation: {first.message}",
        path=path,
        ctx={"keyword": first.validator, "errors": len(errors)},
    )


# --- Conversion --------------------------------------------------------------


def _mapping(obj: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(obj, Mapping):
        raise DescriptorError(f"expected an object, got {type(obj).__name__}", path=where)
    return obj


def _items(obj: Mapping[str, Any], key: str, where: str) -> List[Mapping[str, Any]]:
    """``obj[key]`` as a list of objects; a missing or null key is an empty list."""
    value = obj.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DescriptorError(f"{key!r} must be a list, got {type(value).__name__}", path=f"{where}.{key}")
    return [_mapping(item, f"{where}.{key}[{i}]") for i, item in enumerate(value)]


def _field(obj: Mapping[str, Any], key: str, where: str) -> Any:
    try:
        return obj[key]
    except KeyError as e:
        raise DescriptorError(f"missing {key!r}", path=where, cause=e) from e


def _split_params(obj: Mapping[str, Any], key: str, where: str) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    names: List[str] = []
    types: List[str] = []
    for i, item in enumerate(_items(obj, key, where)):
        at = f"{where}.{key}[{i}]"
        names.append(str(_field(item, "name", at)))
        types.append(str(_field(item, "type", at)))
    return tuple(names), tuple(types)


def _comment(obj: Mapping[str, Any], where: str, cfg: DocgenConfig) -> Optional[str]:
    text = obj.get("documentation")
    if text is None:
        return None
    text = str(text)
    size = len(text.encode("utf-8"))
    if size > cfg.max_comment_bytes:
        raise DescriptorError(
            "documentation comment too large",
            path=f"{where}.documentation",
            ctx={"bytes": size, "max": cfg.max_comment_bytes},
        )
    return text


def _function(obj: Mapping[str, Any], where: str, cfg: DocgenConfig) -> FunctionDescription:
    names, types = _split_params(obj, "inputs", where)
    ret_names, ret_types = _split_params(obj, "outputs", where)
    return FunctionDescription(
        name=str(_field(obj, "name", where)),
        constant=bool(obj.get("constant", False)),
        parameter_names=names,
        parameter_types=types,
        return_names=ret_names,
        return_types=ret_types,
        documentation=_comment(obj, where, cfg),
        signature=obj.get("signature") or None,
    )


def _event(obj: Mapping[str, Any], where: str) -> EventDescription:
    params = tuple(
        EventParameter(
            name=str(_field(p, "name", f"{where}.inputs[{i}]")),
            type=str(_field(p, "type", f"{where}.inputs[{i}]")),
            indexed=bool(p.get("indexed", False)),
        )
        for i, p in enumerate(_items(obj, "inputs", where))
    )
    return EventDescription(
        name=str(_field(obj, "name", where)),
        anonymous=bool(obj.get("anonymous", False)),
        parameters=params,
    )


def _struct(obj: Mapping[str, Any], where: str) -> StructDescription:
    names, types = _split_params(obj, "members", where)
    return StructDescription(
        name=str(_field(obj, "name", where)),
        members=tuple(StructMember(type=t, name=n) for n, t in zip(names, types)),
    )


def _enum(obj: Mapping[str, Any], where: str) -> EnumDescription:
    values = _field(obj, "values", where)
    if not isinstance(values, list):
        raise DescriptorError("'values' must be a list", path=f"{where}.values")
    return EnumDescription(name=str(_field(obj, "name", where)), values=tuple(str(v) for v in values))


def descriptor_from_dict(
    data: Mapping[str, Any], *, config: Optional[DocgenConfig] = None
) -> ContractDescription:
    cfg = config or load_config()
    data = _mapping(data, "$")
    if cfg.strict_schema:
        validate_descriptor(data)

    kind = data.get("kind", "contract")
    if kind not in ("contract", "library"):
        raise DescriptorError(f"unknown contract kind {kind!r}", path="$.kind")

    constructor: Optional[ConstructorDescription] = None
    ctor = data.get("constructor")
    if ctor is not None:
        ctor = _mapping(ctor, "$.constructor")
        names, types = _split_params(ctor, "inputs", "$.constructor")
        constructor = ConstructorDescription(parameter_names=names, parameter_types=types)

    contract = ContractDescription(
        name=str(_field(data, "name", "$")),
        is_library=kind == "library",
        documentation=_comment(data, "$", cfg),
        constructor=constructor,
        functions=tuple(
            _function(f, f"$.functions[{i}]", cfg) for i, f in enumerate(_items(data, "functions", "$"))
        ),
        events=tuple(_event(e, f"$.events[{i}]") for i, e in enumerate(_items(data, "events", "$"))),
        structs=tuple(_struct(s, f"$.structs[{i}]") for i, s in enumerate(_items(data, "structs", "$"))),
        enums=tuple(_enum(e, f"$.enums[{i}]") for i, e in enumerate(_items(data, "enums", "$"))),
    )
    log.debug(
        "loaded %s %s: %d functions, %d events",
        contract.kind,
        contract.name,
        len(contract.functions),
        len(contract.events),
    )
    return contract


def load_descriptor(src: DescriptorLike, *, config: Optional[DocgenConfig] = None) -> ContractDescription:
    """Read (path, JSON text or mapping), validate and convert a descriptor."""
    return descriptor_from_dict(read_descriptor(src), config=config)


def loads_descriptor(text: str, *, config: Optional[DocgenConfig] = None) -> ContractDescription:
    """Same as load_descriptor, for JSON text."""
    return descriptor_from_dict(_parse_text(text), config=config)


__all__ = [
    "DescriptorLike",
    "read_descriptor",
    "validate_descriptor",
    "descriptor_from_dict",
    "load_descriptor",
    "loads_descriptor",
]
