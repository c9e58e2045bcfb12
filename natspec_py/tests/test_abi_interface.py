from __future__ import annotations

import json

import pytest

from natspec_py.abi import abi_interface, render_abi
from natspec_py.errors import InternalInvariantViolation
from natspec_py.model import (
    ConstructorDescription,
    ContractDescription,
    EventDescription,
    EventParameter,
    FunctionDescription,
)


def test_entry_order_functions_constructor_events(token: ContractDescription) -> None:
    abi = abi_interface(token)
    assert [e["type"] for e in abi] == ["function"] * 4 + ["constructor", "event"]
    assert [e.get("name") for e in abi[:4]] == ["transfer", "balanceOf", "totalSupply", "burn"]


@pytest.mark.parametrize("with_ctor", [False, True])
@pytest.mark.parametrize("n_funcs, n_events", [(0, 0), (1, 0), (0, 2), (3, 1)])
def test_entry_count(with_ctor: bool, n_funcs: int, n_events: int) -> None:
    contract = ContractDescription(
        name="C",
        constructor=ConstructorDescription() if with_ctor else None,
        functions=tuple(FunctionDescription(name=f"f{i}") for i in range(n_funcs)),
        events=tuple(EventDescription(name=f"E{i}") for i in range(n_events)),
    )
    assert len(abi_interface(contract)) == n_funcs + int(with_ctor) + n_events


def test_function_entry(token: ContractDescription) -> None:
    transfer = abi_interface(token)[0]
    assert transfer == {
        "type": "function",
        "name": "transfer",
        "constant": False,
        "inputs": [{"name": "to", "type": "address"}, {"name": "value", "type": "uint256"}],
        "outputs": [{"name": "ok", "type": "bool"}],
    }


def test_unnamed_return_keeps_empty_name(token: ContractDescription) -> None:
    total = abi_interface(token)[2]
    assert total["constant"] is True
    assert total["inputs"] == []
    assert total["outputs"] == [{"name": "", "type": "uint256"}]


def test_constructor_entry_has_inputs_only(token: ContractDescription) -> None:
    ctor = abi_interface(token)[4]
    assert ctor == {"type": "constructor", "inputs": [{"name": "supply", "type": "uint256"}]}


def test_event_entry() -> None:
    contract = ContractDescription(
        name="C",
        events=(
            EventDescription(
                name="Transfer",
                parameters=(
                    EventParameter("from", "address", indexed=True),
                    EventParameter("amount", "uint"),
                ),
            ),
        ),
    )
    (event,) = abi_interface(contract)
    assert event["name"] == "Transfer"
    assert event["anonymous"] is False
    assert event["inputs"] == [
        {"name": "from", "type": "address", "indexed": True},
        {"name": "amount", "type": "uint", "indexed": False},
    ]


def test_anonymous_event_flag() -> None:
    contract = ContractDescription(name="C", events=(EventDescription(name="Ping", anonymous=True),))
    assert abi_interface(contract)[0]["anonymous"] is True


def test_name_type_length_mismatch_is_internal_violation() -> None:
    bad = FunctionDescription(name="f", parameter_names=("a", "b"), parameter_types=("uint256",))
    with pytest.raises(InternalInvariantViolation) as excinfo:
        abi_interface(ContractDescription(name="C", functions=(bad,)))
    assert excinfo.value.ctx["where"] == "f(uint256)"


def test_render_is_compact_and_sorted() -> None:
    contract = ContractDescription(
        name="C",
        functions=(
            FunctionDescription(name="f", parameter_names=("x",), parameter_types=("uint256",)),
        ),
    )
    assert render_abi(contract) == (
        '[{"constant":false,"inputs":[{"name":"x","type":"uint256"}],'
        '"name":"f","outputs":[],"type":"function"}]\n'
    )


def test_render_round_trips_through_json(token: ContractDescription) -> None:
    assert json.loads(render_abi(token)) == abi_interface(token)


def test_empty_contract_renders_empty_array() -> None:
    assert render_abi(ContractDescription(name="Empty")) == "[]\n"
