"""Base interface for language-specific source parsers.

Defines the Strategy pattern base class that all language parsers implement.
Reading, parsing and error reporting live here; each subclass only names
its language and supplies the tree-sitter grammar.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

import tree_sitter

from .models import ParseError, SourceUnit

logger = logging.getLogger(__name__)


class BaseLanguageParser(ABC):
    """Abstract base for language-specific tree-sitter parsers.

    Subclasses implement:
    - get_language(): returns language name string
    - get_tree_sitter_language(): returns tree-sitter Language object
    """

    @abstractmethod
    def get_language(self) -> str:
        """Return the language identifier (e.g., 'tsx', 'javascript')."""
        ...

    @abstractmethod
    def get_tree_sitter_language(self) -> tree_sitter.Language:
        """Return the tree-sitter Language object for this language."""
        ...

    def parse_file(self, file_path: str, project_root: str = "") -> SourceUnit:
        """Parse a source file into a SourceUnit.

        Args:
            file_path: Absolute path to the source file
            project_root: Project root for computing relative paths

        Returns:
            SourceUnit for the file contents

        Raises:
            OSError: If the file cannot be read
        """
        # Compute relative path
        if project_root and file_path.startswith(project_root):
            rel_path = file_path[len(project_root):].lstrip("/")
        else:
            rel_path = file_path

        # Bytes as stored: line endings and undecodable bytes round-trip untouched
        with open(file_path, "rb") as f:
            source = f.read()

        return self.parse_bytes(source, rel_path)

    def parse_source(self, source_text: str, file_path: str) -> SourceUnit:
        """Parse source code string into a SourceUnit.

        Args:
            source_text: Source code as string
            file_path: Relative file path (for metadata and unnamed classes)

        Returns:
            SourceUnit holding the tree and the bytes it was parsed from
        """
        return self.parse_bytes(source_text.encode("utf-8"), file_path)

    def parse_bytes(self, source: bytes, file_path: str) -> SourceUnit:
        """Parse raw UTF-8 source bytes into a SourceUnit."""
        errors: List[ParseError] = []

        parser = tree_sitter.Parser(self.get_tree_sitter_language())
        tree = parser.parse(source)

        # Tree-sitter always yields a tree; flag recovered errors but keep going
        if tree.root_node.has_error:
            line = self._first_error_line(tree.root_node)
            logger.warning(f"Tree-sitter reported parse errors in {file_path} (line {line})")
            errors.append(
                ParseError(
                    file_path=file_path,
                    line=line,
                    message="Tree-sitter reported parse errors in file",
                    severity="warning",
                )
            )

        return SourceUnit(
            file_path=file_path,
            language=self.get_language(),
            source=source,
            tree=tree,
            errors=errors,
        )

    @staticmethod
    def _first_error_line(root: tree_sitter.Node) -> int:
        """Return the 1-based line of the first ERROR or MISSING node, or 0."""
        stack = [root]
        while stack:
            node = stack.pop()
            if node.is_error or node.is_missing:
                return node.start_point.row + 1
            if node.has_error:
                stack.extend(reversed(node.children))
        return 0
