"""AST Parser utilities.

Language detection, parser registry, and helper functions.
"""

import os
from typing import Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .base import BaseLanguageParser

# Extension → language mapping
SUPPORTED_EXTENSIONS: Dict[str, str] = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascript",
}

# Directories to skip during file walking
SKIP_DIRECTORIES = frozenset({
    "node_modules",
    "bower_components",
    "jspm_packages",
    ".git",
    "dist",
    "build",
    "out",
    "coverage",
    ".next",
    ".nuxt",
    ".cache",
    "__pycache__",
})

# Parser registry (lazy-loaded to avoid import overhead)
_parser_registry: Dict[str, "BaseLanguageParser"] = {}


def detect_language(file_path: str) -> Optional[str]:
    """Detect source language from file extension.

    Declaration files (``*.d.ts``) carry no runtime code and are
    reported as unsupported.

    Args:
        file_path: Path to the source file

    Returns:
        Language identifier string or None if unsupported
    """
    if file_path.lower().endswith((".d.ts", ".d.mts", ".d.cts")):
        return None
    _, ext = os.path.splitext(file_path)
    return SUPPORTED_EXTENSIONS.get(ext.lower())


def get_parser(language: str) -> "BaseLanguageParser":
    """Get a parser instance for the given language.

    Uses a lazy-initialized registry to avoid loading every
    grammar at startup.

    Args:
        language: Language identifier (e.g., "tsx")

    Returns:
        Parser instance

    Raises:
        ValueError: If language is not supported
    """
    if language not in _parser_registry:
        if language == "typescript":
            from .typescript_parser import TypeScriptParser
            _parser_registry["typescript"] = TypeScriptParser()
        elif language == "tsx":
            from .typescript_parser import TsxParser
            _parser_registry["tsx"] = TsxParser()
        elif language == "javascript":
            from .javascript_parser import JavaScriptParser
            _parser_registry["javascript"] = JavaScriptParser()
        else:
            raise ValueError(
                f"Unsupported language: {language}. "
                f"Supported: {sorted(set(SUPPORTED_EXTENSIONS.values()))}"
            )

    return _parser_registry[language]


def should_skip_directory(dir_name: str) -> bool:
    """Check if a directory should be skipped during file walking.

    Args:
        dir_name: Directory name (not full path)

    Returns:
        True if directory should be skipped
    """
    return dir_name in SKIP_DIRECTORIES or dir_name.startswith(".")


def is_supported_file(file_path: str) -> bool:
    """Check if a file has a supported language extension.

    Args:
        file_path: Path to the file

    Returns:
        True if file type is supported for transformation
    """
    return detect_language(file_path) is not None
