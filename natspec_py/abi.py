"""
ABI (interface description) builder.

Entry order follows the contract: interface functions, then the constructor
(if any), then events. Parameter objects are zipped from the descriptor's
name and type lists; a length mismatch means the upstream resolver produced
an inconsistent descriptor.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from .encoding import JsonNode, compact_json_str
from .errors import InternalInvariantViolation
from .model import ContractDescription, EventDescription

log = logging.getLogger(__name__)


def populate_parameters(
    names: Sequence[str], types: Sequence[str], *, where: str = ""
) -> List[JsonNode]:
    if len(names) != len(types):
        raise InternalInvariantViolation(
            "names and types vector size does not match",
            ctx={"where": where, "names": len(names), "types": len(types)},
        )
    return [{"name": name, "type": typ} for name, typ in zip(names, types)]


def _event_entry(event: EventDescription) -> Dict[str, JsonNode]:
    return {
        "type": "event",
        "name": event.name,
        "anonymous": event.anonymous,
        "inputs": [
            {"name": p.name, "type": p.type, "indexed": p.indexed} for p in event.parameters
        ],
    }


def abi_interface(contract: ContractDescription) -> List[JsonNode]:
    """Build the ABI entry list for a contract."""
    abi: List[JsonNode] = []

    for fn in contract.functions:
        abi.append(
            {
                "type": "function",
                "name": fn.name,
                "constant": fn.constant,
                "inputs": populate_parameters(
                    fn.parameter_names, fn.parameter_types, where=fn.external_signature
                ),
                "outputs": populate_parameters(
                    fn.return_names, fn.return_types, where=fn.external_signature
                ),
            }
        )

    if contract.constructor is not None:
        ctor = contract.constructor
        abi.append(
            {
                "type": "constructor",
                "inputs": populate_parameters(
                    ctor.parameter_names, ctor.parameter_types, where="constructor"
                ),
            }
        )

    abi.extend(_event_entry(ev) for ev in contract.events)

    log.debug(
        "abi for %s: %d functions, constructor=%s, %d events",
        contract.name,
        len(contract.functions),
        contract.constructor is not None,
        len(contract.events),
    )
    return abi


def render_abi(contract: ContractDescription) -> str:
    return compact_json_str(abi_interface(contract))


__all__ = ["abi_interface", "render_abi", "populate_parameters"]
