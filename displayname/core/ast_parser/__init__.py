"""displayname AST Parser: tree-sitter based source parsing.

Public API:
    parse_file(path, project_root) → SourceUnit
    parse_source(source, file_path, language) → SourceUnit
    detect_language(file_path) → str | None
"""

from .models import AddedName, ParseError, SourceUnit, TransformResult
from .utils import detect_language, get_parser, is_supported_file, should_skip_directory

__all__ = [
    "parse_file",
    "parse_source",
    "reparse",
    "detect_language",
    "get_parser",
    "is_supported_file",
    "should_skip_directory",
    "AddedName",
    "ParseError",
    "SourceUnit",
    "TransformResult",
]


def _resolve_language(file_path: str, language: str | None) -> str:
    if language is None:
        language = detect_language(file_path)
    if language is None:
        raise ValueError(f"Cannot detect a supported language for {file_path}")
    return language


def parse_file(file_path: str, project_root: str = "", language: str | None = None) -> SourceUnit:
    """Parse a source file into a SourceUnit.

    Detects language from file extension and uses the matching
    tree-sitter grammar.

    Args:
        file_path: Absolute path to the source file
        project_root: Project root for computing relative paths
        language: Language identifier. If None, detected from file_path.

    Returns:
        SourceUnit for the file

    Raises:
        ValueError: If the language is not supported
        OSError: If the file cannot be read
    """
    parser = get_parser(_resolve_language(file_path, language))
    return parser.parse_file(file_path, project_root)


def parse_source(source_text: str, file_path: str, language: str | None = None) -> SourceUnit:
    """Parse source code string into a SourceUnit.

    Args:
        source_text: Source code as string
        file_path: Relative file path (for metadata)
        language: Language identifier. If None, detected from file_path.

    Returns:
        SourceUnit for the source text

    Raises:
        ValueError: If the language is not supported
    """
    parser = get_parser(_resolve_language(file_path, language))
    return parser.parse_source(source_text, file_path)


def reparse(unit: SourceUnit, source: bytes) -> SourceUnit:
    """Parse new bytes with the same grammar and path as an existing unit."""
    return get_parser(unit.language).parse_bytes(source, unit.file_path)
