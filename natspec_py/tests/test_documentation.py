from __future__ import annotations

import pytest

from natspec_py.docs import dev_documentation, user_documentation
from natspec_py.errors import IllegalTagForContext, MalformedTag, ParamNameMismatch
from natspec_py.model import ContractDescription, FunctionDescription


def _fn(doc, *params: str, **kw) -> FunctionDescription:
    return FunctionDescription(
        name="f",
        parameter_names=params,
        parameter_types=tuple("uint" for _ in params),
        documentation=doc,
        **kw,
    )


def _contract(*functions: FunctionDescription, doc=None) -> ContractDescription:
    return ContractDescription(name="C", documentation=doc, functions=functions)


# --------------------------------------------------------------------------------------
# User documentation
# --------------------------------------------------------------------------------------


def test_user_doc_notice() -> None:
    fn = _fn("@notice Hello")
    assert user_documentation(_contract(fn)) == {"methods": {"f()": {"notice": "Hello"}}}


def test_user_doc_folds_continuation() -> None:
    doc = user_documentation(_contract(_fn("@notice Line one\ncontinued")))
    assert doc["methods"]["f()"]["notice"] == "Line one continued"


def test_user_doc_for_token(token: ContractDescription) -> None:
    assert user_documentation(token) == {
        "methods": {
            "transfer(address,uint256)": {"notice": "Send `value` tokens to `to`"},
            "balanceOf(address)": {"notice": "Balance of an account"},
        }
    }


@pytest.mark.parametrize("comment", [None, ""])
def test_functions_without_comment_are_left_out(comment) -> None:
    contract = _contract(_fn(comment, "x"))
    assert user_documentation(contract) == {"methods": {}}
    assert dev_documentation(contract) == {"methods": {}}


def test_user_doc_skips_function_without_notice() -> None:
    assert user_documentation(_contract(_fn("@dev only details"))) == {"methods": {}}


def test_user_doc_uses_explicit_signature() -> None:
    fn = _fn("@notice hi", signature="f(uint256)")
    assert list(user_documentation(_contract(fn))["methods"]) == ["f(uint256)"]


# --------------------------------------------------------------------------------------
# Developer documentation
# --------------------------------------------------------------------------------------


def test_dev_doc_params() -> None:
    fn = _fn("@param x the value\n@param y other", "x", "y")
    assert dev_documentation(_contract(fn)) == {
        "methods": {"f(uint,uint)": {"params": {"x": "the value", "y": "other"}}}
    }


def test_dev_doc_unknown_param_fails() -> None:
    fn = _fn("@param z bad", "x", "y")
    with pytest.raises(ParamNameMismatch) as excinfo:
        dev_documentation(_contract(fn))
    assert excinfo.value.ctx == {"param": "z", "function": "f(uint,uint)"}


def test_param_mismatch_aborts_whole_document() -> None:
    good = FunctionDescription(name="good", documentation="@dev fine")
    bad = _fn("@param nope x")
    with pytest.raises(ParamNameMismatch):
        dev_documentation(_contract(good, bad))


def test_dev_doc_for_token(token: ContractDescription) -> None:
    assert dev_documentation(token) == {
        "author": "Alice",
        "title": "Token ledger",
        "methods": {
            "transfer(address,uint256)": {
                "details": "Reverts on insufficient balance",
                "params": {"to": "receiver", "value": "amount to send"},
                "return": "whether it succeeded",
            },
            "balanceOf(address)": {"params": {"owner": "account to query"}},
            "burn(uint256)": {"details": "Only the owner may burn"},
        },
    }


def test_dev_doc_function_author() -> None:
    fn = _fn("@author Dana\n@return nothing")
    assert dev_documentation(_contract(fn))["methods"]["f()"] == {
        "author": "Dana",
        "return": "nothing",
    }


def test_dev_doc_skips_notice_only_function() -> None:
    assert dev_documentation(_contract(_fn("@notice user facing only"))) == {"methods": {}}


def test_duplicate_param_keeps_last_description() -> None:
    fn = _fn("@param x first\n@param x second", "x")
    assert dev_documentation(_contract(fn))["methods"]["f(uint)"]["params"] == {"x": "second"}


def test_contract_comment_without_author_or_title() -> None:
    doc = dev_documentation(_contract(doc="@notice just a contract"))
    assert doc == {"methods": {}}


def test_contract_comment_title_only() -> None:
    assert dev_documentation(_contract(doc="@title Vault"))["title"] == "Vault"


def test_title_on_function_fails_dev_doc() -> None:
    with pytest.raises(IllegalTagForContext):
        dev_documentation(_contract(_fn("@title no")))


def test_malformed_contract_comment_fails_dev_doc() -> None:
    with pytest.raises(MalformedTag):
        dev_documentation(_contract(doc="@author"))


def test_user_doc_ignores_contract_comment() -> None:
    assert user_documentation(_contract(doc="@title Vault")) == {"methods": {}}
