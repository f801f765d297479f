"""Display-name transform: recognition, synthesis and rewriting.

Public API:
    create_transform(overrides) → (SourceUnit → SourceUnit)
    transform_source(source, file_path, options) → TransformResult
    transform_file(path, options) → TransformResult
"""

from .driver import create_transform, transform_file, transform_source, transform_unit
from .options import TransformOptions, resolve_options
from .rewriter import Splice, apply_splices
from .synthesizer import make_assignment, make_static_member
from .walker import DisplayNameWalker, collect_splices

__all__ = [
    "create_transform",
    "transform_file",
    "transform_source",
    "transform_unit",
    "TransformOptions",
    "resolve_options",
    "Splice",
    "apply_splices",
    "make_assignment",
    "make_static_member",
    "DisplayNameWalker",
    "collect_splices",
]
