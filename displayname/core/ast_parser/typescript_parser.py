"""TypeScript AST parsers using tree-sitter.

Two grammars ship with tree-sitter-typescript: plain TypeScript, where
`<T>expr` is a type assertion, and TSX, where `<` may open a JSX element.
Files are routed to one or the other by extension.
"""

import tree_sitter
import tree_sitter_typescript

from .base import BaseLanguageParser

_TS_LANGUAGE = tree_sitter.Language(tree_sitter_typescript.language_typescript())
_TSX_LANGUAGE = tree_sitter.Language(tree_sitter_typescript.language_tsx())


class TypeScriptParser(BaseLanguageParser):
    """tree-sitter based TypeScript parser.

    Node shapes the display-name transform relies on:
    - variable_declarator with `name`, `type` (type_annotation) and `value`
    - class_declaration / abstract_class_declaration with class_heritage
      holding extends_clause and implements_clause
    - public_field_definition members carrying a `static` token
    """

    def get_language(self) -> str:
        return "typescript"

    def get_tree_sitter_language(self) -> tree_sitter.Language:
        return _TS_LANGUAGE


class TsxParser(TypeScriptParser):
    """tree-sitter based TSX parser (TypeScript plus JSX elements)."""

    def get_language(self) -> str:
        return "tsx"

    def get_tree_sitter_language(self) -> tree_sitter.Language:
        return _TSX_LANGUAGE
