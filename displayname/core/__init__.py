# Lazy imports so targeted imports like `from displayname.core.constants import ...`
# do not pull in tree-sitter.

__all__ = [
    "create_transform",
    "transform_source",
    "transform_file",
    "TransformOptions",
    "load_options",
    "parse_source",
    "parse_file",
]

_IMPORT_MAP = {
    "create_transform": ".transform",
    "transform_source": ".transform",
    "transform_file": ".transform",
    "TransformOptions": ".transform",
    "load_options": ".config",
    "parse_source": ".ast_parser",
    "parse_file": ".ast_parser",
}


def __getattr__(name):
    if name in _IMPORT_MAP:
        import importlib
        module = importlib.import_module(_IMPORT_MAP[name], __package__)
        return getattr(module, name)
    raise AttributeError(f"module 'displayname.core' has no attribute {name}")
