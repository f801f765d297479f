"""displayname: add static displayName properties to React components.

Recognizes function components (``const A: React.FC = ...``), factory
wrapped components (``React.memo(...)``, ``React.forwardRef(...)``) and
component classes (``extends React.Component``) in TypeScript and
JavaScript sources, and names each after its declared identifier.

    >>> from displayname import transform_source
    >>> result = transform_source(source_text, "Button.tsx")
    >>> result.source
"""

__version__ = "0.4.0"

__all__ = [
    "create_transform",
    "transform_source",
    "transform_file",
    "load_options",
    "parse_source",
    "parse_file",
    "SourceUnit",
    "TransformOptions",
    "TransformResult",
]

_IMPORT_MAP = {
    "create_transform": ".core.transform",
    "transform_source": ".core.transform",
    "transform_file": ".core.transform",
    "TransformOptions": ".core.transform",
    "load_options": ".core.config",
    "parse_source": ".core.ast_parser",
    "parse_file": ".core.ast_parser",
    "SourceUnit": ".core.ast_parser",
    "TransformResult": ".core.ast_parser",
}


def __getattr__(name):
    if name in _IMPORT_MAP:
        import importlib
        module = importlib.import_module(_IMPORT_MAP[name], __package__)
        return getattr(module, name)
    raise AttributeError(f"module 'displayname' has no attribute {name}")
