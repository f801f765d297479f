"""Source rewriter.

tree-sitter trees are read-only, so a rewrite is expressed as splices:
"put these synthesized nodes after this statement" or "append these
members to this class body". The rewriter turns splices into text
insertions, applies them to a copy of the source bytes, and parses the
result into a new SourceUnit. Text outside the insertions is kept
byte for byte.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence, Union

import tree_sitter

from ..ast_parser import reparse
from ..ast_parser.models import SourceUnit
from ..constants import DEFAULT_INDENT
from .synthesizer import AssignmentStatement, StaticMember

logger = logging.getLogger(__name__)

SIBLING = "sibling"
MEMBER = "member"

SyntheticNode = Union[AssignmentStatement, StaticMember]

# Parents whose children form a statement list
_STATEMENT_CONTAINERS = frozenset({
    "program",
    "statement_block",
    "switch_case",
    "switch_default",
})


@dataclass(frozen=True)
class Splice:
    """Synthesized nodes to place relative to an existing node.

    ``sibling``: anchor is a statement, nodes follow it in its list.
    ``member``: anchor is a class body, nodes become its last members.
    """

    anchor: tree_sitter.Node
    placement: str
    nodes: Sequence[SyntheticNode]


@dataclass(frozen=True)
class _Insertion:
    offset: int
    text: str


def apply_splices(unit: SourceUnit, splices: Sequence[Splice]) -> SourceUnit:
    """Apply splices and return the rewritten unit.

    Returns ``unit`` itself when there is nothing to apply.
    """
    if not splices:
        return unit

    newline = "\r\n" if b"\r\n" in unit.source else "\n"
    insertions: List[_Insertion] = []
    for splice in splices:
        if splice.placement == SIBLING:
            insertions.extend(_sibling_insertions(unit, splice, newline))
        elif splice.placement == MEMBER:
            insertions.extend(_member_insertions(unit, splice, newline))
        else:
            raise ValueError(f"Unknown splice placement: {splice.placement}")

    # Stable sort keeps traversal order for insertions at the same offset
    insertions.sort(key=lambda ins: ins.offset)

    parts: List[bytes] = []
    cursor = 0
    for ins in insertions:
        parts.append(unit.source[cursor:ins.offset])
        parts.append(ins.text.encode("utf-8"))
        cursor = ins.offset
    parts.append(unit.source[cursor:])

    logger.debug(f"Applied {len(insertions)} insertions to {unit.file_path}")
    return reparse(unit, b"".join(parts))


def _sibling_insertions(unit: SourceUnit, splice: Splice, newline: str) -> List[_Insertion]:
    statement = splice.anchor
    indent = _line_indent(unit.source, statement.start_byte)
    end = _statement_end(statement)
    text = "".join(f"{newline}{indent}{node.render()}" for node in splice.nodes)

    parent = statement.parent
    if parent is not None and parent.type not in _STATEMENT_CONTAINERS:
        # Single-statement slot (braceless if/else/loop body): lift into a block
        return [
            _Insertion(statement.start_byte, "{ "),
            _Insertion(end, f"{text} }}"),
        ]
    return [_Insertion(end, text)]


def _member_insertions(unit: SourceUnit, splice: Splice, newline: str) -> List[_Insertion]:
    body = splice.anchor
    children = body.children
    if len(children) < 2:
        # Body without braces only appears in broken trees
        logger.warning(f"Skipping malformed class body in {unit.file_path} at line {body.start_point.row + 1}")
        return []

    open_brace, close_brace = children[0], children[-1]
    last = children[-2]
    owner = body.parent if body.parent is not None else body
    class_indent = _line_indent(unit.source, owner.start_byte)

    member_indent = class_indent + DEFAULT_INDENT
    for member in children[1:-1]:
        if member.start_point.row > open_brace.start_point.row:
            member_indent = _line_indent(unit.source, member.start_byte)
            break

    text = "".join(f"{newline}{member_indent}{node.render()}" for node in splice.nodes)
    if close_brace.start_point.row == last.end_point.row:
        # `{}` or `{ x = 1 }` on one line: give the closing brace its own line
        text += f"{newline}{class_indent}"
    return [_Insertion(last.end_byte, text)]


def _statement_end(statement: tree_sitter.Node) -> int:
    """End offset of a statement, including a trailing comment on the same line."""
    following = statement.next_sibling
    if (
        following is not None
        and following.type == "comment"
        and following.start_point.row == statement.end_point.row
    ):
        return following.end_byte
    return statement.end_byte


def _line_indent(source: bytes, offset: int) -> str:
    """Leading whitespace of the line containing ``offset``."""
    line_start = source.rfind(b"\n", 0, offset) + 1
    end = line_start
    while end < len(source) and source[end:end + 1] in (b" ", b"\t"):
        end += 1
    return source[line_start:end].decode("utf-8")
