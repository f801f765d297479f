"""Tree walker for the display-name transform.

Finds component declarations in one source unit and returns the splices
that add their display names. Rules by node kind:

- Declaration statement (``const A: React.FC = ...``): collect the
  bindings that are components, descend into the statement unless
  ``only_root``, then emit one assignment per component that is not
  already named by a sibling ``A.displayName = ...`` statement.
- Component class (``class A extends React.Component``): always descend
  into the class first, then append ``static displayName`` unless the
  class already declares one.
- Anything else: descend, except that with ``only_root`` only the file
  itself (and the ``export`` wrappers of its statements) is descended.
  ``declare`` declarations are never descended: they bind no runtime value.

The walker holds no state between units; every call to ``walk`` starts
from scratch.
"""

import logging
from dataclasses import dataclass
from typing import List

import tree_sitter

from ..ast_parser.models import SourceUnit
from . import predicates
from .options import TransformOptions
from .rewriter import MEMBER, SIBLING, Splice
from .synthesizer import make_assignment, make_static_member

logger = logging.getLogger(__name__)

# Nodes that may be descended even in only_root mode
_ROOT_SCOPE_TYPES = frozenset({"program", "export_statement"})


@dataclass(frozen=True)
class Candidate:
    """A binding recognized as a component within one declaration statement."""

    identifier: str
    declarator: tree_sitter.Node
    name: str


class DisplayNameWalker:
    """Recursive descent over one SourceUnit."""

    def __init__(self, unit: SourceUnit, options: TransformOptions):
        self._unit = unit
        self._options = options

    def walk(self) -> List[Splice]:
        """Return the splices for the whole unit, in traversal order."""
        return self.visit(self._unit.root)

    def visit(self, node: tree_sitter.Node) -> List[Splice]:
        """Return the splices produced by ``node`` and its descendants."""
        if predicates.is_declaration_statement(node):
            return self._visit_declaration_statement(node)
        if self._is_component_class(node):
            return self._visit_component_class(node)
        if self._descends(node):
            return self._visit_children(node)
        return []

    # =========================================================================
    # Node kinds
    # =========================================================================

    def _visit_declaration_statement(self, node: tree_sitter.Node) -> List[Splice]:
        candidates = self._collect_candidates(node)

        splices: List[Splice] = []
        if not self._options.only_root:
            splices.extend(self._visit_children(node))

        if not candidates:
            return splices

        statement = predicates.statement_of(node)
        existing = predicates.prior_assignment_index(statement, self._unit)

        assignments = []
        for candidate in candidates:
            if candidate.identifier in existing:
                logger.debug(f"{candidate.identifier} already has a displayName, skipping")
                continue
            logger.debug(
                f"Adding displayName {candidate.name!r} after line {statement.start_point.row + 1}"
            )
            assignments.append(make_assignment(candidate.identifier, candidate.name))

        if assignments:
            splices.append(Splice(anchor=statement, placement=SIBLING, nodes=assignments))
        return splices

    def _visit_component_class(self, node: tree_sitter.Node) -> List[Splice]:
        # The body is walked first and regardless of only_root
        splices = self._visit_children(node)

        if predicates.has_static_name_member(node, self._unit):
            return splices

        body = node.child_by_field_name("body")
        if body is None:
            return splices

        name = predicates.class_name(node, self._unit) or self._unit.name
        logger.debug(f"Adding static displayName {name!r} to class at line {node.start_point.row + 1}")
        splices.append(Splice(anchor=body, placement=MEMBER, nodes=[make_static_member(name)]))
        return splices

    def _visit_children(self, node: tree_sitter.Node) -> List[Splice]:
        # Plain nodes are walked with an explicit stack so deeply nested
        # expressions do not consume Python stack frames.
        splices: List[Splice] = []
        stack = list(reversed(node.children))
        while stack:
            child = stack.pop()
            if predicates.is_declaration_statement(child) or self._is_component_class(child):
                splices.extend(self.visit(child))
            elif self._descends(child):
                stack.extend(reversed(child.children))
        return splices

    # =========================================================================
    # Helpers
    # =========================================================================

    def _collect_candidates(self, statement: tree_sitter.Node) -> List[Candidate]:
        candidates: List[Candidate] = []
        for declarator in statement.named_children:
            if declarator.type != "variable_declarator":
                continue

            identifier = predicates.declared_name(declarator, self._unit)
            if identifier is None:
                continue

            # A type annotation match wins; the initializer is then not consulted
            if predicates.is_function_typed_candidate(declarator, self._unit, self._options):
                candidates.append(Candidate(identifier, declarator, identifier))
                continue

            value = declarator.child_by_field_name("value")
            if value is not None and predicates.is_factory_wrapped_candidate(
                value, self._unit, self._options
            ):
                candidates.append(Candidate(identifier, declarator, identifier))
        return candidates

    def _is_component_class(self, node: tree_sitter.Node) -> bool:
        return predicates.is_class_declaration(node) and predicates.is_base_class_candidate(
            node, self._unit, self._options
        )

    def _descends(self, node: tree_sitter.Node) -> bool:
        if node.type == predicates.AMBIENT_DECLARATION_TYPE:
            return False
        return not self._options.only_root or node.type in _ROOT_SCOPE_TYPES


def collect_splices(unit: SourceUnit, options: TransformOptions) -> List[Splice]:
    """Walk a unit and return the splices that name its components."""
    return DisplayNameWalker(unit, options).walk()
