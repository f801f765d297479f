"""Structural predicates for component detection.

Pure functions over tree-sitter nodes. Matching is purely textual:
no symbol or type resolution is attempted, so ``React.FC`` only
matches when the source literally says ``React.FC``.

Every predicate is total. A node lacking an expected child (no type
annotation, no heritage, an unusual member shape) is simply not a
match.
"""

from typing import Dict, Iterator, Optional

import tree_sitter

from ..ast_parser.models import SourceUnit
from ..constants import DISPLAY_NAME_PROPERTY, MAX_UNWRAP_DEPTH
from .options import TransformOptions

# Statements introducing named bindings (`const a = ...`, `var b = ...`)
DECLARATION_STATEMENT_TYPES = frozenset({"lexical_declaration", "variable_declaration"})

CLASS_DECLARATION_TYPES = frozenset({"class_declaration", "abstract_class_declaration"})

# TypeScript grammar uses public_field_definition, JavaScript field_definition
_FIELD_DEFINITION_TYPES = frozenset({"public_field_definition", "field_definition"})

_TYPE_NAME_TYPES = frozenset({"type_identifier", "nested_type_identifier"})

# `declare const A: ...`, `declare class ...`, `declare module "x" { ... }`
AMBIENT_DECLARATION_TYPE = "ambient_declaration"


# =========================================================================
# Node classification
# =========================================================================

def is_declaration_statement(node: tree_sitter.Node) -> bool:
    """True for a declaration list used as a statement.

    The initializer of a ``for (let i = 0; ...)`` loop has the same node
    type but is not a statement. Ambient declarations bind no runtime
    value and are never statements the transform can follow.
    """
    if node.type not in DECLARATION_STATEMENT_TYPES or is_ambient(node):
        return False
    parent = node.parent
    if parent is not None and parent.type == "for_statement":
        return parent.child_by_field_name("initializer") != node
    return True


def is_class_declaration(node: tree_sitter.Node) -> bool:
    """True for class declarations, including ``export default class extends X {}``."""
    if node.type in CLASS_DECLARATION_TYPES:
        return not is_ambient(node)
    # Anonymous default-exported classes parse as class expressions
    parent = node.parent
    return node.type == "class" and parent is not None and parent.type == "export_statement"


def is_ambient(node: tree_sitter.Node) -> bool:
    """True if the node sits inside a ``declare`` declaration."""
    ancestor = node.parent
    while ancestor is not None:
        if ancestor.type == AMBIENT_DECLARATION_TYPE:
            return True
        ancestor = ancestor.parent
    return False


def statement_of(declaration: tree_sitter.Node) -> tree_sitter.Node:
    """Return the node standing in the statement list for a declaration.

    ``export const A = ...`` is one statement: the export wrapper is what
    has siblings, and what synthesized statements must follow.
    """
    parent = declaration.parent
    if parent is not None and parent.type == "export_statement":
        return parent
    return declaration


def declared_name(declarator: tree_sitter.Node, unit: SourceUnit) -> Optional[str]:
    """Identifier bound by a variable_declarator; None for destructuring."""
    name = declarator.child_by_field_name("name")
    if name is None or name.type != "identifier":
        return None
    return unit.text(name)


def class_name(class_node: tree_sitter.Node, unit: SourceUnit) -> Optional[str]:
    name = class_node.child_by_field_name("name")
    if name is None:
        return None
    return unit.text(name)


# =========================================================================
# Component predicates
# =========================================================================

def is_function_typed_candidate(
    declarator: tree_sitter.Node,
    unit: SourceUnit,
    options: TransformOptions,
) -> bool:
    """True if the binding is annotated with a configured function type.

    ``const A: React.FC<Props> = ...`` compares ``React.FC``; type
    arguments are not part of the name. Only plain type references
    qualify, unions and function types never match.
    """
    annotation = declarator.child_by_field_name("type")
    if annotation is None:
        return False

    type_node = _first_named(annotation)
    if type_node is not None and type_node.type == "generic_type":
        type_node = type_node.child_by_field_name("name")
    if type_node is None or type_node.type not in _TYPE_NAME_TYPES:
        return False

    return unit.text(type_node) in options.function_type_names


def is_base_class_candidate(
    class_node: tree_sitter.Node,
    unit: SourceUnit,
    options: TransformOptions,
) -> bool:
    """True if any heritage type text starts with a configured base class name."""
    for heritage in heritage_type_texts(class_node, unit):
        if any(heritage.startswith(base) for base in options.base_class_names):
            return True
    return False


def is_factory_wrapped_candidate(
    expression: tree_sitter.Node,
    unit: SourceUnit,
    options: TransformOptions,
) -> bool:
    """True if an initializer resolves to a call of a configured factory.

    Call and member-access layers are peeled from the outside in until
    a bare identifier callee (``memo(...)``) or an ``object.property``
    pair of identifiers (``React.memo``) is reached. So
    ``React.memo(Inner)`` and ``React.forwardRef<T, P>(render)`` match,
    and so does ``React.memo.bind(null)`` which peels down to
    ``React.memo``.
    """
    node: Optional[tree_sitter.Node] = expression
    for _ in range(MAX_UNWRAP_DEPTH):
        if node is None:
            return False

        if node.type == "call_expression":
            # Tagged templates (styled.div`...`) share the node type
            arguments = node.child_by_field_name("arguments")
            if arguments is not None and arguments.type == "template_string":
                return False
            callee = node.child_by_field_name("function")
            if callee is not None and callee.type == "identifier":
                return unit.text(callee) in options.factory_function_names
            node = callee

        elif node.type == "member_expression":
            obj = node.child_by_field_name("object")
            prop = node.child_by_field_name("property")
            if (
                obj is not None
                and prop is not None
                and obj.type == "identifier"
                and prop.type == "property_identifier"
            ):
                return f"{unit.text(obj)}.{unit.text(prop)}" in options.factory_function_names
            node = obj

        else:
            return False

    return False


def has_static_name_member(class_node: tree_sitter.Node, unit: SourceUnit) -> bool:
    """True if the class body declares ``static displayName``.

    Methods, accessors, computed keys and instance fields are not
    the target member.
    """
    body = class_node.child_by_field_name("body")
    if body is None:
        return False

    for member in body.named_children:
        if member.type not in _FIELD_DEFINITION_TYPES:
            continue
        if not any(child.type == "static" for child in member.children):
            continue
        name = member.child_by_field_name("name") or member.child_by_field_name("property")
        if name is not None and _property_name(name, unit) == DISPLAY_NAME_PROPERTY:
            return True
    return False


def prior_assignment_index(statement: tree_sitter.Node, unit: SourceUnit) -> Dict[str, bool]:
    """Map identifiers already given a displayName among a statement's siblings.

    Only the statement list the declaration lives in is scanned, so a
    name assigned in another function body does not count.
    """
    index: Dict[str, bool] = {}
    parent = statement.parent
    if parent is None:
        return index

    for sibling in parent.named_children:
        target = assigned_display_name_target(sibling, unit)
        if target is not None:
            index[target] = True
    return index


def assigned_display_name_target(node: tree_sitter.Node, unit: SourceUnit) -> Optional[str]:
    """Return ``Comp`` if the node is the statement ``Comp.displayName = ...``."""
    if node.type != "expression_statement":
        return None

    expression = _first_named(node)
    if expression is None or expression.type != "assignment_expression":
        return None

    left = expression.child_by_field_name("left")
    if left is None or left.type != "member_expression":
        return None

    obj = left.child_by_field_name("object")
    prop = left.child_by_field_name("property")
    if obj is None or prop is None or obj.type != "identifier":
        return None
    if unit.text(prop) != DISPLAY_NAME_PROPERTY:
        return None
    return unit.text(obj)


# =========================================================================
# Helpers
# =========================================================================

def heritage_type_texts(class_node: tree_sitter.Node, unit: SourceUnit) -> Iterator[str]:
    """Yield the rendered text of every extends/implements type of a class.

    ``class A extends React.Component<P, S> implements Foo`` yields
    ``React.Component<P, S>`` then ``Foo``.
    """
    for child in class_node.children:
        if child.type != "class_heritage":
            continue
        for clause in child.named_children:
            if clause.type == "extends_clause":
                yield from _extends_clause_texts(clause, unit)
            elif clause.type == "implements_clause":
                for type_node in clause.named_children:
                    if type_node.type != "comment":
                        yield unit.text(type_node)
            elif clause.type != "comment":
                # JavaScript grammar: class_heritage holds the expression itself
                yield unit.text(clause)


def _extends_clause_texts(clause: tree_sitter.Node, unit: SourceUnit) -> Iterator[str]:
    # Children: 'extends', value, [type_arguments], ',', value, ...
    start: Optional[int] = None
    end = 0
    for child in clause.children:
        if child.type in ("extends", ",", "comment"):
            continue
        if child.type == "type_arguments" and start is not None:
            end = child.end_byte
            continue
        if start is not None:
            yield unit.source[start:end].decode("utf-8", errors="replace")
        start, end = child.start_byte, child.end_byte
    if start is not None:
        yield unit.source[start:end].decode("utf-8", errors="replace")


def _property_name(name: tree_sitter.Node, unit: SourceUnit) -> Optional[str]:
    if name.type == "property_identifier":
        return unit.text(name)
    if name.type == "string":
        # static 'displayName' = ... names the same property
        return "".join(unit.text(c) for c in name.named_children if c.type == "string_fragment")
    return None


def _first_named(node: tree_sitter.Node) -> Optional[tree_sitter.Node]:
    for child in node.named_children:
        if child.type != "comment":
            return child
    return None
