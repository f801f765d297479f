"""JavaScript AST parser using tree-sitter.

The tree-sitter-javascript grammar understands JSX, so .js and .jsx files
share one parser. There are no type annotations in this grammar: only the
class-heritage and factory-wrapper rules can ever match.
"""

import tree_sitter
import tree_sitter_javascript

from .base import BaseLanguageParser

_JS_LANGUAGE = tree_sitter.Language(tree_sitter_javascript.language())


class JavaScriptParser(BaseLanguageParser):
    """tree-sitter based JavaScript parser.

    Differences from the TypeScript grammar that matter downstream:
    - class_heritage holds the extended expression directly
      (no extends_clause wrapper)
    - class fields are field_definition nodes whose name is the
      `property` field
    """

    def get_language(self) -> str:
        return "javascript"

    def get_tree_sitter_language(self) -> tree_sitter.Language:
        return _JS_LANGUAGE
