"""Transform configuration.

TransformOptions is created once per transform and never changes
afterwards. Caller overrides replace whole fields; name lists are
never merged with the defaults.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ..constants import (
    DEFAULT_BASE_CLASS_NAMES,
    DEFAULT_FACTORY_FUNCTION_NAMES,
    DEFAULT_FUNCTION_TYPE_NAMES,
)

# camelCase spellings used in tsconfig transformer settings
_CAMEL_CASE_ALIASES: Dict[str, str] = {
    "onlyFileRoot": "only_root",
    "funcTypes": "function_type_names",
    "classTypes": "base_class_names",
    "factoryFuncs": "factory_function_names",
}


@dataclass(frozen=True)
class TransformOptions:
    """Which declarations count as components.

    Attributes:
        only_root: Only look at declarations at the top level of the file.
            Components usually live there, and skipping nested scopes
            avoids walking every function body.
        function_type_names: Type annotations marking a variable as a
            function component (exact match on the type name, without
            type arguments).
        base_class_names: Heritage prefixes marking a class as a component
            (``React.Component`` also matches ``React.Component<Props>``).
        factory_function_names: Callees whose result is a component
            (``forwardRef`` or ``React.forwardRef`` style).
    """

    only_root: bool = False
    function_type_names: Tuple[str, ...] = DEFAULT_FUNCTION_TYPE_NAMES
    base_class_names: Tuple[str, ...] = DEFAULT_BASE_CLASS_NAMES
    factory_function_names: Tuple[str, ...] = DEFAULT_FACTORY_FUNCTION_NAMES

    @classmethod
    def from_mapping(cls, overrides: Optional[Mapping[str, Any]] = None) -> "TransformOptions":
        """Build options from a partial mapping, defaulting missing fields."""
        return cls().merge(overrides)

    def merge(self, overrides: Optional[Mapping[str, Any]] = None) -> "TransformOptions":
        """Return a copy with the given fields replaced.

        Accepts snake_case field names and the camelCase names used in
        tsconfig transformer settings (``onlyFileRoot``, ``funcTypes``, ...).
        A value of None leaves the field unchanged.

        Raises:
            ValueError: On unknown keys or values of the wrong shape
        """
        if not overrides:
            return self

        known = {f.name for f in fields(self)}
        changes: Dict[str, Any] = {}
        for key, value in overrides.items():
            name = _CAMEL_CASE_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(
                    f"Unknown transform option: {key}. Supported: {sorted(known)}"
                )
            if value is None:
                continue
            if name == "only_root":
                if not isinstance(value, bool):
                    raise ValueError(f"Option {key} must be a boolean, got {type(value).__name__}")
                changes[name] = value
            else:
                changes[name] = _as_name_tuple(key, value)

        return replace(self, **changes) if changes else self


def _as_name_tuple(key: str, value: Any) -> Tuple[str, ...]:
    # A bare string would otherwise be split into characters
    if isinstance(value, str) or not hasattr(value, "__iter__"):
        raise ValueError(f"Option {key} must be a list of names, got {type(value).__name__}")
    names = tuple(value)
    for name in names:
        if not isinstance(name, str) or not name:
            raise ValueError(f"Option {key} must only contain non-empty strings, got {name!r}")
    return names


OptionsLike = Union[TransformOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike) -> TransformOptions:
    """Accept TransformOptions, a partial mapping, or None."""
    if options is None:
        return TransformOptions()
    if isinstance(options, TransformOptions):
        return options
    return TransformOptions.from_mapping(options)
