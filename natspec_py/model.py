"""
Read-only contract descriptors consumed by the renderers.

These mirror what an upstream resolver hands over once inheritance,
visibility and canonical type names have been worked out: the externally
visible functions, the constructor, the events, and (for libraries) the
struct/enum definitions. Nothing in natspec_py mutates them.

Type names are taken verbatim; computing canonical names is the upstream
resolver's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class FunctionDescription:
    name: str
    constant: bool = False
    parameter_names: Tuple[str, ...] = ()
    parameter_types: Tuple[str, ...] = ()
    return_names: Tuple[str, ...] = ()
    return_types: Tuple[str, ...] = ()
    documentation: Optional[str] = None
    # Explicit external signature; derived from name + parameter types when absent.
    signature: Optional[str] = None

    @property
    def external_signature(self) -> str:
        """Key identifying the function at the call boundary, e.g. ``f(uint256,address)``."""
        if self.signature:
            return self.signature
        return f"{self.name}({','.join(self.parameter_types)})"


@dataclass(frozen=True)
class ConstructorDescription:
    parameter_names: Tuple[str, ...] = ()
    parameter_types: Tuple[str, ...] = ()


@dataclass(frozen=True)
class EventParameter:
    name: str
    type: str
    indexed: bool = False


@dataclass(frozen=True)
class EventDescription:
    name: str
    anonymous: bool = False
    parameters: Tuple[EventParameter, ...] = ()


@dataclass(frozen=True)
class StructMember:
    type: str
    name: str


@dataclass(frozen=True)
class StructDescription:
    name: str
    members: Tuple[StructMember, ...] = ()


@dataclass(frozen=True)
class EnumDescription:
    name: str
    values: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ContractDescription:
    name: str
    is_library: bool = False
    documentation: Optional[str] = None
    constructor: Optional[ConstructorDescription] = None
    functions: Tuple[FunctionDescription, ...] = ()
    events: Tuple[EventDescription, ...] = ()
    # Only rendered for libraries.
    structs: Tuple[StructDescription, ...] = ()
    enums: Tuple[EnumDescription, ...] = ()

    @property
    def kind(self) -> str:
        return "library" if self.is_library else "contract"


__all__ = [
    "FunctionDescription",
    "ConstructorDescription",
    "EventParameter",
    "EventDescription",
    "StructMember",
    "StructDescription",
    "EnumDescription",
    "ContractDescription",
]
