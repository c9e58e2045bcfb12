from __future__ import annotations

from typing import Any, Dict

import pytest

from natspec_py.config import DocgenConfig, load_config
from natspec_py.model import (
    ConstructorDescription,
    ContractDescription,
    EnumDescription,
    EventDescription,
    EventParameter,
    FunctionDescription,
    StructDescription,
    StructMember,
)

TRANSFER_DOC = (
    "@notice Send `value` tokens to `to`\n"
    "@dev Reverts on insufficient\n"
    "balance\n"
    "@param to receiver\n"
    "@param value amount to send\n"
    "@return whether it succeeded"
)


@pytest.fixture
def config() -> DocgenConfig:
    return DocgenConfig(doc_indent=2, log_level="WARNING", strict_schema=True, max_comment_bytes=65_536)


@pytest.fixture(autouse=True)
def _fresh_config_cache():
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture
def token() -> ContractDescription:
    return ContractDescription(
        name="Token",
        documentation="@title Token ledger\n@author Alice",
        constructor=ConstructorDescription(parameter_names=("supply",), parameter_types=("uint256",)),
        functions=(
            FunctionDescription(
                name="transfer",
                parameter_names=("to", "value"),
                parameter_types=("address", "uint256"),
                return_names=("ok",),
                return_types=("bool",),
                documentation=TRANSFER_DOC,
            ),
            FunctionDescription(
                name="balanceOf",
                constant=True,
                parameter_names=("owner",),
                parameter_types=("address",),
                return_names=("balance",),
                return_types=("uint256",),
                documentation="Balance of an account\n@param owner account to query",
            ),
            FunctionDescription(
                name="totalSupply",
                constant=True,
                return_names=("",),
                return_types=("uint256",),
            ),
            FunctionDescription(
                name="burn",
                parameter_names=("amount",),
                parameter_types=("uint256",),
                documentation="@dev Only the owner may burn",
            ),
        ),
        events=(
            EventDescription(
                name="Transfer",
                parameters=(
                    EventParameter("from", "address", indexed=True),
                    EventParameter("to", "address", indexed=True),
                    EventParameter("value", "uint256"),
                ),
            ),
        ),
    )


@pytest.fixture
def point_library() -> ContractDescription:
    return ContractDescription(
        name="L",
        is_library=True,
        constructor=ConstructorDescription(parameter_names=("a",), parameter_types=("int",)),
        structs=(StructDescription("Point", (StructMember("int", "x"), StructMember("int", "y"))),),
        enums=(EnumDescription("Color", ("Red", "Green", "Blue")),),
        functions=(
            FunctionDescription(
                name="norm",
                constant=True,
                parameter_names=("p",),
                parameter_types=("L.Point",),
                return_names=("n",),
                return_types=("int",),
            ),
        ),
    )


@pytest.fixture
def token_descriptor() -> Dict[str, Any]:
    """JSON form of the ``token`` fixture."""
    return {
        "name": "Token",
        "kind": "contract",
        "documentation": "@title Token ledger\n@author Alice",
        "constructor": {"inputs": [{"name": "supply", "type": "uint256"}]},
        "functions": [
            {
                "name": "transfer",
                "inputs": [{"name": "to", "type": "address"}, {"name": "value", "type": "uint256"}],
                "outputs": [{"name": "ok", "type": "bool"}],
                "documentation": TRANSFER_DOC,
            },
            {
                "name": "balanceOf",
                "constant": True,
                "inputs": [{"name": "owner", "type": "address"}],
                "outputs": [{"name": "balance", "type": "uint256"}],
                "documentation": "Balance of an account\n@param owner account to query",
            },
            {
                "name": "totalSupply",
                "constant": True,
                "outputs": [{"name": "", "type": "uint256"}],
            },
            {
                "name": "burn",
                "inputs": [{"name": "amount", "type": "uint256"}],
                "documentation": "@dev Only the owner may burn",
            },
        ],
        "events": [
            {
                "name": "Transfer",
                "inputs": [
                    {"name": "from", "type": "address", "indexed": True},
                    {"name": "to", "type": "address", "indexed": True},
                    {"name": "value", "type": "uint256"},
                ],
            }
        ],
    }
