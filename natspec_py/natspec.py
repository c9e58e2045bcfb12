"""
NatSpec comment parser.

A comment is scanned line by line. A line holding an ``@`` starts a tag; the
tag name runs up to the next space or newline and the rest of the line is the
tag body. Lines without a tag continue whatever tag was active last, folded
into single-spaced prose. Text before any tag on the first line counts as
``@notice``.

Recognised tags:

    @notice  @dev  @return  @param <name> <description>
    @author  (contracts and functions)
    @title   (contracts only)

Every comment is parsed by its own ``NatspecParser``, so the active-tag state
of one comment can never leak into the next one.

Example:
    >>> doc = parse_comment("@notice Send tokens\\n to someone\\n@param to receiver")
    >>> doc.notice
    'Send tokens to someone'
    >>> doc.params
    [('to', 'receiver')]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from .errors import IllegalTagForContext, InternalInvariantViolation, MalformedTag, UnknownTag


class DocTag(Enum):
    """Tag whose body the next tag-less line continues."""

    NONE = "none"
    DEV = "dev"
    NOTICE = "notice"
    RETURN = "return"
    AUTHOR = "author"
    TITLE = "title"
    PARAM = "param"


class CommentOwner(str, Enum):
    """Declaration a comment is attached to; decides which tags are legal."""

    CONTRACT = "contract"
    FUNCTION = "function"


# Tags whose body is plain text, and the ParsedDoc attribute holding it.
_TEXT_FIELDS: Dict[DocTag, str] = {
    DocTag.DEV: "dev",
    DocTag.NOTICE: "notice",
    DocTag.RETURN: "return_",
    DocTag.AUTHOR: "author",
    DocTag.TITLE: "title",
}


@dataclass
class ParsedDoc:
    """Fields collected from a single comment."""

    notice: str = ""
    dev: str = ""
    author: str = ""
    title: str = ""
    return_: str = ""
    params: List[Tuple[str, str]] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (
            self.notice or self.dev or self.author or self.title or self.return_ or self.params
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "notice": self.notice,
            "dev": self.dev,
            "author": self.author,
            "title": self.title,
            "return": self.return_,
            "params": [[name, desc] for name, desc in self.params],
        }


def _line_end(text: str, pos: int) -> int:
    nl = text.find("\n", pos)
    return len(text) if nl == -1 else nl


def _next_line(text: str, nl_pos: int) -> int:
    # Step over the newline, or stay at end of input.
    return nl_pos if nl_pos == len(text) else nl_pos + 1


def _first_space_or_nl(text: str, pos: int) -> int:
    end = len(text)
    space = text.find(" ", pos)
    space = end if space == -1 else space
    return min(space, _line_end(text, pos))


class NatspecParser:
    """
    Single-use parser for one comment string.

    ``last_tag`` records the tag that a following tag-less line continues.
    It starts at ``DocTag.NONE`` and is only changed by recognising a tag.
    """

    def __init__(self, owner: CommentOwner = CommentOwner.FUNCTION) -> None:
        self.owner = owner
        self.doc = ParsedDoc()
        self.last_tag = DocTag.NONE

    def parse(self, text: str) -> ParsedDoc:
        pos = 0
        end = len(text)
        while pos < end:
            tag_pos = text.find("@", pos)
            nl_pos = _line_end(text, pos)

            if tag_pos != -1 and tag_pos < nl_pos:
                name_end = _first_space_or_nl(text, tag_pos)
                if name_end == end:
                    raise MalformedTag(
                        f"end of tag {text[tag_pos:name_end]!r} not found",
                        ctx={"offset": tag_pos},
                    )
                pos = self._parse_tag(text, name_end + 1, text[tag_pos + 1 : name_end])
            elif self.last_tag is not DocTag.NONE:
                pos = self._append_tag(text, pos)
            elif pos == 0:
                # untagged leading text is the notice
                pos = self._parse_tag(text, pos, "notice")
            elif nl_pos == end:
                break
            else:
                pos = nl_pos + 1
        return self.doc

    # -- tags ---------------------------------------------------------------

    def _parse_tag(self, text: str, pos: int, tag: str) -> int:
        # "@ " with an active tag reads as a continuation of that tag
        if self.last_tag is not DocTag.NONE and not tag:
            return self._append_tag(text, pos)

        if tag == "dev":
            return self._parse_line(text, pos, DocTag.DEV)
        if tag == "notice":
            return self._parse_line(text, pos, DocTag.NOTICE)
        if tag == "return":
            return self._parse_line(text, pos, DocTag.RETURN)
        if tag == "author":
            return self._parse_line(text, pos, DocTag.AUTHOR)
        if tag == "title":
            if self.owner is not CommentOwner.CONTRACT:
                raise IllegalTagForContext(
                    "@title tag is legal only for contracts", ctx={"owner": self.owner.value}
                )
            return self._parse_line(text, pos, DocTag.TITLE)
        if tag == "param":
            return self._parse_param(text, pos)
        raise UnknownTag(f"unknown tag {tag!r} encountered", ctx={"tag": tag, "offset": pos})

    def _append_tag(self, text: str, pos: int) -> int:
        if self.last_tag is DocTag.PARAM:
            return self._append_param(text, pos)
        if self.last_tag in _TEXT_FIELDS:
            return self._parse_line(text, pos, self.last_tag)
        raise InternalInvariantViolation(
            "illegal documentation tag state", ctx={"last_tag": self.last_tag.value}
        )

    def _parse_line(self, text: str, pos: int, tag: DocTag) -> int:
        attr = _TEXT_FIELDS[tag]
        nl_pos = _line_end(text, pos)
        setattr(self.doc, attr, _join(getattr(self.doc, attr), text, pos, nl_pos))
        self.last_tag = tag
        return _next_line(text, nl_pos)

    def _parse_param(self, text: str, pos: int) -> int:
        nl_pos = _line_end(text, pos)
        space = text.find(" ", pos, nl_pos)
        if space == -1:
            raise MalformedTag(
                f"end of param name not found: {text[pos:nl_pos]!r}", ctx={"offset": pos}
            )
        self.doc.params.append((text[pos:space], text[space + 1 : nl_pos]))
        self.last_tag = DocTag.PARAM
        return _next_line(text, nl_pos)

    def _append_param(self, text: str, pos: int) -> int:
        if not self.doc.params:
            raise InternalInvariantViolation("tried to append to an empty parameter list")
        nl_pos = _line_end(text, pos)
        name, desc = self.doc.params[-1]
        self.doc.params[-1] = (name, _join(desc, text, pos, nl_pos))
        return _next_line(text, nl_pos)


def _join(current: str, text: str, pos: int, stop: int) -> str:
    """Append ``text[pos:stop]`` to ``current``, separated by one space unless it starts with one."""
    if current and pos < len(text) and text[pos] != " ":
        current += " "
    return current + text[pos:stop]


def parse_comment(text: str, owner: CommentOwner = CommentOwner.FUNCTION) -> ParsedDoc:
    """Parse one comment with a fresh parser."""
    return NatspecParser(owner).parse(text)


__all__ = ["DocTag", "CommentOwner", "ParsedDoc", "NatspecParser", "parse_comment"]
