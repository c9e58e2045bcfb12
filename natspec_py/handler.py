"""
Single entry point: pick an output type and render it for one contract.

    >>> documentation(contract, DocumentationType.NATSPEC_USER)   # user doc JSON
    >>> documentation(contract, "abi")                            # compact ABI JSON
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

from .abi import render_abi
from .config import DocgenConfig, load_config
from .docs import dev_documentation, user_documentation
from .encoding import styled_json_str
from .errors import InternalInvariantViolation
from .interface import solidity_interface
from .model import ContractDescription

log = logging.getLogger(__name__)


class DocumentationType(str, Enum):
    NATSPEC_USER = "userdoc"
    NATSPEC_DEV = "devdoc"
    ABI_INTERFACE = "abi"
    ABI_SOLIDITY_INTERFACE = "interface"

    @property
    def file_suffix(self) -> str:
        return _SUFFIXES[self]


_SUFFIXES = {
    DocumentationType.NATSPEC_USER: ".docuser",
    DocumentationType.NATSPEC_DEV: ".docdev",
    DocumentationType.ABI_INTERFACE: ".abi",
    DocumentationType.ABI_SOLIDITY_INTERFACE: ".sol",
}

DocTypeLike = Union[DocumentationType, str]


def _coerce_type(doc_type: DocTypeLike) -> DocumentationType:
    if isinstance(doc_type, DocumentationType):
        return doc_type
    try:
        return DocumentationType(str(doc_type).lower())
    except ValueError as e:
        raise InternalInvariantViolation(
            "unknown documentation type", ctx={"type": str(doc_type)}, cause=e
        ) from e


class InterfaceHandler:
    """Renders the four outputs for a contract. One instance per generation pass."""

    def __init__(self, config: Optional[DocgenConfig] = None) -> None:
        self.config = config or load_config()

    def documentation(self, contract: ContractDescription, doc_type: DocTypeLike) -> str:
        kind = _coerce_type(doc_type)
        log.debug("generating %s for %s %s", kind.value, contract.kind, contract.name)

        if kind is DocumentationType.NATSPEC_USER:
            return self.user_documentation(contract)
        if kind is DocumentationType.NATSPEC_DEV:
            return self.dev_documentation(contract)
        if kind is DocumentationType.ABI_INTERFACE:
            return self.abi_interface(contract)
        if kind is DocumentationType.ABI_SOLIDITY_INTERFACE:
            return self.solidity_interface(contract)
        raise InternalInvariantViolation("unknown documentation type", ctx={"type": kind.value})

    def user_documentation(self, contract: ContractDescription) -> str:
        return styled_json_str(user_documentation(contract), indent=self.config.doc_indent)

    def dev_documentation(self, contract: ContractDescription) -> str:
        return styled_json_str(dev_documentation(contract), indent=self.config.doc_indent)

    def abi_interface(self, contract: ContractDescription) -> str:
        return render_abi(contract)

    def solidity_interface(self, contract: ContractDescription) -> str:
        return solidity_interface(contract)


def documentation(
    contract: ContractDescription,
    doc_type: DocTypeLike,
    *,
    config: Optional[DocgenConfig] = None,
) -> str:
    """Render one output type for ``contract`` with a fresh handler."""
    return InterfaceHandler(config).documentation(contract, doc_type)


__all__ = ["DocumentationType", "InterfaceHandler", "documentation"]
