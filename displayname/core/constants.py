"""Shared constants for displayname.

This module contains constants that are used across multiple modules
to avoid duplication and ensure consistency.
"""

# =============================================================================
# Target Property
# =============================================================================

# Property every recognized component receives
DISPLAY_NAME_PROPERTY = "displayName"

# =============================================================================
# Default Component Catalogue
# =============================================================================

# Namespace the default names are qualified with
DEFAULT_NAMESPACE = "React"

# Type annotations marking a variable as a function component
DEFAULT_FUNCTION_TYPE_NAMES = (
    f"{DEFAULT_NAMESPACE}.FunctionComponent",
    f"{DEFAULT_NAMESPACE}.FC",
)

# Heritage prefixes marking a class as a component
DEFAULT_BASE_CLASS_NAMES = (
    f"{DEFAULT_NAMESPACE}.Component",
    f"{DEFAULT_NAMESPACE}.PureComponent",
)

# Calls whose result is a component
DEFAULT_FACTORY_FUNCTION_NAMES = (
    f"{DEFAULT_NAMESPACE}.forwardRef",
    f"{DEFAULT_NAMESPACE}.memo",
)

# =============================================================================
# Traversal Limits
# =============================================================================

# Maximum call/member-access layers peeled when resolving a factory callee
MAX_UNWRAP_DEPTH = 64

# =============================================================================
# Output Formatting
# =============================================================================

# Indentation used for a class member when the class body has no member to copy from
DEFAULT_INDENT = "  "
