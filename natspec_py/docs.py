"""
User and developer documentation built from NatSpec comments.

User doc::

    {"methods": {"transfer(address,uint256)": {"notice": "..."}}}

Dev doc::

    {"author": "...", "title": "...",
     "methods": {"transfer(address,uint256)": {
         "details": "...", "author": "...", "return": "...",
         "params": {"to": "...", "value": "..."}}}}

A method shows up only when its comment yields something for that document.
Each comment gets a fresh parser.
"""

from __future__ import annotations

import logging
from typing import Dict

from .encoding import JsonNode
from .errors import ParamNameMismatch
from .model import ContractDescription, FunctionDescription
from .natspec import CommentOwner, ParsedDoc, parse_comment

log = logging.getLogger(__name__)


def _dev_method(fn: FunctionDescription, doc: ParsedDoc) -> Dict[str, JsonNode]:
    method: Dict[str, JsonNode] = {}
    if doc.dev:
        method["details"] = doc.dev
    if doc.author:
        method["author"] = doc.author

    params: Dict[str, JsonNode] = {}
    for name, desc in doc.params:
        if name not in fn.parameter_names:
            raise ParamNameMismatch(
                f'documented parameter "{name}" not found in the parameter list of the function.',
                ctx={"param": name, "function": fn.external_signature},
            )
        params[name] = desc
    if doc.params:
        method["params"] = params

    if doc.return_:
        method["return"] = doc.return_
    return method


def user_documentation(contract: ContractDescription) -> Dict[str, JsonNode]:
    methods: Dict[str, JsonNode] = {}
    for fn in contract.functions:
        if not fn.documentation:
            continue
        doc = parse_comment(fn.documentation, CommentOwner.FUNCTION)
        # @notice is the only user-facing tag
        if doc.notice:
            methods[fn.external_signature] = {"notice": doc.notice}

    log.debug("userdoc for %s: %d of %d methods", contract.name, len(methods), len(contract.functions))
    return {"methods": methods}


def dev_documentation(contract: ContractDescription) -> Dict[str, JsonNode]:
    out: Dict[str, JsonNode] = {}

    if contract.documentation:
        contract_doc = parse_comment(contract.documentation, CommentOwner.CONTRACT)
        if contract_doc.author:
            out["author"] = contract_doc.author
        if contract_doc.title:
            out["title"] = contract_doc.title

    methods: Dict[str, JsonNode] = {}
    for fn in contract.functions:
        if not fn.documentation:
            continue
        method = _dev_method(fn, parse_comment(fn.documentation, CommentOwner.FUNCTION))
        if method:
            methods[fn.external_signature] = method
    out["methods"] = methods

    log.debug("devdoc for %s: %d of %d methods", contract.name, len(methods), len(contract.functions))
    return out


__all__ = ["user_documentation", "dev_documentation"]
