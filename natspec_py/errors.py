"""
Typed exceptions for natspec_py.

Design goals
- Structured: machine-readable code + human message + contextual fields.
- Distinct kinds: callers can tell user-input errors in comment text apart
  from internal invariant violations (a bug upstream or in this package).
- Stable across processes: to_dict()/from_dict() round-trip.

Hierarchy:
  - NatspecError (base)
      - DocstringParsingError       (problems in NatSpec comment text)
          - MalformedTag
          - UnknownTag
          - IllegalTagForContext
          - ParamNameMismatch
      - InternalInvariantViolation  (inconsistent descriptors, unreachable states)
      - DescriptorError             (unusable contract descriptor input)

Every one of these aborts the generation pass that raised it; there is no
partial output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Type


class NatspecErrorCode(str, Enum):
    """Canonical error codes."""

    UNKNOWN = "UNKNOWN"

    # Comment grammar
    MALFORMED_TAG = "MALFORMED_TAG"
    UNKNOWN_TAG = "UNKNOWN_TAG"
    ILLEGAL_TAG_FOR_CONTEXT = "ILLEGAL_TAG_FOR_CONTEXT"
    PARAM_NAME_MISMATCH = "PARAM_NAME_MISMATCH"

    # Bugs / upstream inconsistencies
    INTERNAL = "INTERNAL_INVARIANT_VIOLATION"

    # Input loading
    DESCRIPTOR = "DESCRIPTOR"


@dataclass
class NatspecError(Exception):
    """
    Base structured error.

    Fields:
      code:  stable machine code (NatspecErrorCode | str)
      msg:   human-readable summary
      ctx:   small dict of contextual fields (tag names, offsets, signatures)
      cause: optional underlying exception (not serialized)
    """

    code: NatspecErrorCode | str = NatspecErrorCode.UNKNOWN
    msg: str = "natspec error"
    ctx: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        if not isinstance(self.ctx, dict):
            self.ctx = {"_ctx_type_error": str(type(self.ctx)), "repr": repr(self.ctx)}

    def __str__(self) -> str:
        parts = [f"[{_code_str(self.code)}] {self.msg}"]
        if self.ctx:
            parts.append(f"ctx={self.ctx}")
        if self.cause:
            parts.append(f"cause={self.cause!r}")
        return " ".join(parts)

    @property
    def is_user_error(self) -> bool:
        """True for errors caused by the documented input rather than a bug."""
        return isinstance(self, (DocstringParsingError, DescriptorError))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": _code_str(self.code),
            "msg": self.msg,
            "ctx": self.ctx,
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "NatspecError":
        """Rebuild the most specific error type for a serialized code."""
        code_raw = d.get("code", NatspecErrorCode.UNKNOWN)
        try:
            code: NatspecErrorCode | str = NatspecErrorCode(code_raw)
        except ValueError:
            code = str(code_raw)
        msg = str(d.get("msg", "natspec error"))
        ctx = dict(d.get("ctx", {}))
        target = _BY_CODE.get(code) if isinstance(code, NatspecErrorCode) else None
        if target is None:
            return NatspecError(code=code, msg=msg, ctx=ctx)
        return target(msg, ctx=ctx)


def _code_str(code: NatspecErrorCode | str) -> str:
    return code.value if isinstance(code, NatspecErrorCode) else str(code)


class DocstringParsingError(NatspecError):
    """Base for errors in the NatSpec comment text itself."""

    default_code: NatspecErrorCode = NatspecErrorCode.UNKNOWN

    def __init__(
        self,
        msg: str = "documentation comment could not be parsed",
        *,
        ctx: Optional[Mapping[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(code=self.default_code, msg=msg, ctx=dict(ctx or {}), cause=cause)


class MalformedTag(DocstringParsingError):
    """A tag marker without terminator, or a @param without name/description separator."""

    default_code = NatspecErrorCode.MALFORMED_TAG


class UnknownTag(DocstringParsingError):
    """A tag name outside dev/notice/return/author/title/param."""

    default_code = NatspecErrorCode.UNKNOWN_TAG


class IllegalTagForContext(DocstringParsingError):
    """A recognised tag used on a declaration that does not support it."""

    default_code = NatspecErrorCode.ILLEGAL_TAG_FOR_CONTEXT


class ParamNameMismatch(DocstringParsingError):
    """A documented parameter that the function does not declare."""

    default_code = NatspecErrorCode.PARAM_NAME_MISMATCH


class InternalInvariantViolation(NatspecError):
    """Inconsistent descriptor data or an unreachable parser/mode state."""

    def __init__(
        self,
        msg: str = "internal invariant violated",
        *,
        ctx: Optional[Mapping[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(code=NatspecErrorCode.INTERNAL, msg=msg, ctx=dict(ctx or {}), cause=cause)


class DescriptorError(NatspecError):
    """Contract descriptor input is missing, malformed or fails schema validation."""

    def __init__(
        self,
        msg: str = "invalid contract descriptor",
        *,
        path: Optional[str] = None,
        ctx: Optional[Mapping[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        base_ctx: Dict[str, Any] = {}
        if path is not None:
            base_ctx["path"] = path
        if ctx:
            base_ctx.update(ctx)
        super().__init__(code=NatspecErrorCode.DESCRIPTOR, msg=msg, ctx=base_ctx, cause=cause)


_BY_CODE: Dict[NatspecErrorCode, Type[NatspecError]] = {
    NatspecErrorCode.MALFORMED_TAG: MalformedTag,
    NatspecErrorCode.UNKNOWN_TAG: UnknownTag,
    NatspecErrorCode.ILLEGAL_TAG_FOR_CONTEXT: IllegalTagForContext,
    NatspecErrorCode.PARAM_NAME_MISMATCH: ParamNameMismatch,
    NatspecErrorCode.INTERNAL: InternalInvariantViolation,
    NatspecErrorCode.DESCRIPTOR: DescriptorError,
}


__all__ = [
    "NatspecErrorCode",
    "NatspecError",
    "DocstringParsingError",
    "MalformedTag",
    "UnknownTag",
    "IllegalTagForContext",
    "ParamNameMismatch",
    "InternalInvariantViolation",
    "DescriptorError",
]
