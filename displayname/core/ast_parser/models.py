"""AST Parser data models.

Defines the core data structures for parsed source units and transform
output. These are pure data containers, no parsing logic.
"""

import os
from dataclasses import dataclass, field
from typing import List

import tree_sitter


@dataclass
class ParseError:
    """An error encountered during parsing."""

    file_path: str
    line: int
    message: str
    severity: str = "warning"  # "warning" | "error"


@dataclass
class SourceUnit:
    """One parsed source file.

    Wraps the tree-sitter tree together with the bytes it was parsed from,
    so node text can always be recovered. Units are never edited in place:
    rewriting produces a new unit from new source bytes.
    """

    file_path: str  # Relative path within project
    language: str  # "typescript" | "tsx" | "javascript"
    source: bytes
    tree: tree_sitter.Tree
    errors: List[ParseError] = field(default_factory=list)

    @property
    def root(self) -> tree_sitter.Node:
        return self.tree.root_node

    @property
    def name(self) -> str:
        """File base name without its extension ("src/Button.tsx" -> "Button")."""
        return os.path.splitext(os.path.basename(self.file_path))[0]

    @property
    def source_text(self) -> str:
        return self.source.decode("utf-8", errors="replace")

    def text(self, node: tree_sitter.Node) -> str:
        """Return the exact source text spanned by a node."""
        return self.source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


@dataclass
class AddedName:
    """A displayName synthesized by the transform."""

    name: str  # "Button"
    kind: str  # "assignment" | "static_member"
    line: int  # 1-based line of the declaration that received it


@dataclass
class TransformResult:
    """Complete transform output for a single file."""

    file_path: str
    language: str
    source: str  # Output text (the input text when nothing changed)
    changed: bool = False
    added: List[AddedName] = field(default_factory=list)
    errors: List[ParseError] = field(default_factory=list)
    source_bytes: bytes = b""  # Output as bytes, exact outside the inserted fragments

    @property
    def ok(self) -> bool:
        return not any(e.severity == "error" for e in self.errors)
