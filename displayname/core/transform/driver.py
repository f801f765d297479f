"""Transform driver.

``create_transform`` binds options once and returns a function from
SourceUnit to SourceUnit. ``transform_source`` and ``transform_file``
wrap parsing and report what was added, the way ``parse_source`` and
``parse_file`` wrap the parsers.
"""

import logging
from typing import Callable, List, Sequence, Tuple

from ..ast_parser import detect_language, parse_file, parse_source
from ..ast_parser.models import AddedName, ParseError, SourceUnit, TransformResult
from .options import OptionsLike, TransformOptions, resolve_options
from .rewriter import MEMBER, Splice, apply_splices
from .walker import collect_splices

logger = logging.getLogger(__name__)

Transform = Callable[[SourceUnit], SourceUnit]


def create_transform(overrides: OptionsLike = None) -> Transform:
    """Create a transform bound to the given options.

    Args:
        overrides: Partial option mapping, TransformOptions, or None.
            Missing fields take their defaults; given fields replace them.

    Returns:
        Function returning a rewritten unit, or the same unit when no
        component needed a name. The input unit is never modified.
    """
    options = resolve_options(overrides)

    def transform(unit: SourceUnit) -> SourceUnit:
        rewritten, _ = transform_unit(unit, options)
        return rewritten

    return transform


def transform_unit(unit: SourceUnit, options: TransformOptions) -> Tuple[SourceUnit, List[AddedName]]:
    """Transform one unit and describe the names that were added."""
    splices = collect_splices(unit, options)
    return apply_splices(unit, splices), _added_names(splices)


def transform_source(
    source_text: str,
    file_path: str,
    options: OptionsLike = None,
    language: str | None = None,
) -> TransformResult:
    """Add display names to source code given as a string.

    Args:
        source_text: Source code as string
        file_path: File path; picks the grammar and names unnamed classes
        options: Partial option mapping, TransformOptions, or None
        language: Language identifier. If None, detected from file_path.

    Returns:
        TransformResult with the output text and the names added

    Raises:
        ValueError: If the language is unsupported or the options are invalid
    """
    resolved = resolve_options(options)
    unit = parse_source(source_text, file_path, language)
    return _run(unit, resolved)


def transform_file(
    file_path: str,
    options: OptionsLike = None,
    project_root: str = "",
) -> TransformResult:
    """Add display names to a file on disk (the file itself is not written).

    Unreadable files produce a result carrying an error instead of raising.

    Raises:
        ValueError: If the language is unsupported or the options are invalid
    """
    resolved = resolve_options(options)
    language = detect_language(file_path)
    if language is None:
        raise ValueError(f"Cannot detect a supported language for {file_path}")

    try:
        unit = parse_file(file_path, project_root, language)
    except OSError as e:
        logger.error(f"Cannot read {file_path}: {e}")
        return TransformResult(
            file_path=file_path,
            language=language,
            source="",
            errors=[ParseError(file_path=file_path, line=0, message=str(e), severity="error")],
        )

    return _run(unit, resolved)


def _run(unit: SourceUnit, options: TransformOptions) -> TransformResult:
    rewritten, added = transform_unit(unit, options)
    return TransformResult(
        file_path=unit.file_path,
        language=unit.language,
        source=rewritten.source_text,
        changed=rewritten is not unit,
        added=added,
        errors=list(unit.errors),
        source_bytes=rewritten.source,
    )


def _added_names(splices: Sequence[Splice]) -> List[AddedName]:
    added: List[AddedName] = []
    for splice in splices:
        # Member splices anchor on the class body; report the class line
        owner = splice.anchor.parent if splice.placement == MEMBER else splice.anchor
        line = (owner or splice.anchor).start_point.row + 1
        kind = "static_member" if splice.placement == MEMBER else "assignment"
        for node in splice.nodes:
            added.append(AddedName(name=node.value, kind=kind, line=line))
    return added
