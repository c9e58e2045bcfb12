"""
natspec_py — ABI, interface text and NatSpec documentation for resolved contracts.

Public entrypoints:

- documentation(contract, doc_type) -> str
    Render one of: user doc, dev doc, ABI JSON, minimal interface text.
- parse_comment(text, owner=CommentOwner.FUNCTION) -> ParsedDoc
    Parse a single NatSpec comment.
- load_descriptor(path_or_mapping) -> ContractDescription
    Build a contract descriptor from its JSON form.

Errors are subclasses of natspec_py.errors.NatspecError.
"""

from __future__ import annotations

from .errors import (
    DescriptorError,
    DocstringParsingError,
    IllegalTagForContext,
    InternalInvariantViolation,
    MalformedTag,
    NatspecError,
    ParamNameMismatch,
    UnknownTag,
)
from .handler import DocumentationType, InterfaceHandler, documentation
from .loader import load_descriptor, loads_descriptor
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
from .natspec import CommentOwner, DocTag, NatspecParser, ParsedDoc, parse_comment
from .version import __version__ as __version__


def version() -> str:
    """Return the natspec_py semantic version string."""
    return __version__


__all__ = [
    "__version__",
    "version",
    "documentation",
    "DocumentationType",
    "InterfaceHandler",
    "parse_comment",
    "NatspecParser",
    "ParsedDoc",
    "DocTag",
    "CommentOwner",
    "load_descriptor",
    "loads_descriptor",
    "ContractDescription",
    "ConstructorDescription",
    "FunctionDescription",
    "EventDescription",
    "EventParameter",
    "StructDescription",
    "StructMember",
    "EnumDescription",
    "NatspecError",
    "DocstringParsingError",
    "MalformedTag",
    "UnknownTag",
    "IllegalTagForContext",
    "ParamNameMismatch",
    "InternalInvariantViolation",
    "DescriptorError",
]
