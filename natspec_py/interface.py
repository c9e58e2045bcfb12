"""
Minimal textual interface.

Renders only what a caller needs to talk to the contract:

    contract Token{function Token(uint256 supply);function transfer(address to,uint256 value)returns(bool ok);}

Libraries additionally carry every struct and enum they define. Types used
from elsewhere (other libraries, global scope) are not pulled in.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .errors import InternalInvariantViolation
from .model import ContractDescription, EnumDescription, FunctionDescription, StructDescription

log = logging.getLogger(__name__)


def _param_list(names: Sequence[str], types: Sequence[str], *, where: str = "") -> str:
    if len(names) != len(types):
        raise InternalInvariantViolation(
            "names and types vector size does not match",
            ctx={"where": where, "names": len(names), "types": len(types)},
        )
    return "(" + ",".join(f"{typ} {name}" for name, typ in zip(names, types)) + ")"


def _struct(stru: StructDescription) -> str:
    return "struct " + stru.name + "{" + "".join(f"{m.type} {m.name};" for m in stru.members) + "}"


def _enum(enu: EnumDescription) -> str:
    return "enum " + enu.name + "{" + ",".join(enu.values) + "}"


def _function(fn: FunctionDescription) -> str:
    sig = fn.external_signature
    out = "function " + fn.name + _param_list(fn.parameter_names, fn.parameter_types, where=sig)
    if fn.constant:
        out += "constant "
    if fn.return_types:
        out += "returns" + _param_list(fn.return_names, fn.return_types, where=sig)
    else:
        out = out.rstrip(" ")
    return out + ";"


def solidity_interface(contract: ContractDescription) -> str:
    parts: List[str] = [f"{contract.kind} {contract.name}{{"]

    if contract.is_library:
        parts.extend(_struct(s) for s in contract.structs)
        parts.extend(_enum(e) for e in contract.enums)

    if contract.constructor is not None:
        ctor = contract.constructor
        parts.append(
            "function "
            + contract.name
            + _param_list(ctor.parameter_names, ctor.parameter_types, where="constructor")
            + ";"
        )

    parts.extend(_function(fn) for fn in contract.functions)
    parts.append("}")

    log.debug("interface text for %s %s", contract.kind, contract.name)
    return "".join(parts)


__all__ = ["solidity_interface"]
