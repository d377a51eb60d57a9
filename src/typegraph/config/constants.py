"""Configuration constants.

This module contains values that are protocol constraints of the oracle or
well-known names of the produced graph. Defaults that users may reasonably
change are referenced from models.py.
"""

# =============================================================================
# Graph Entry Names
# =============================================================================

DEFAULT_EXPORT_NAME = "default"
"""Registry entry describing the module's default export."""

SYNTHETIC_DEFAULT_NAME = "_default"
"""Registry entry holding an unnamed default-exported value."""

# =============================================================================
# Oracle Conventions
# =============================================================================

ANONYMOUS_NAME_PREFIX = "__"
"""Prefix of oracle-synthesized symbol names (__type, __object, __function)."""

CONSTRUCTOR_MEMBER_NAME = "__constructor"
"""Members-table key holding a class's constructor declarations."""

DEFAULT_INDEX_KEY_NAME = "key"
"""Index parameter name used when the index signature declares none."""

HIDDEN_ANONYMOUS_MAX_HOPS = 3
"""Declaration parents walked to find the named container of an anonymous type."""

# =============================================================================
# Library Classification Defaults
# =============================================================================

DEFAULT_BASE_LIB_PATTERNS = (
    "*/typescript/lib/lib.*.d.ts",
    "lib.*.d.ts",
)

DEFAULT_GLOBAL_PATTERNS = ("*/@types/node/globals.d.ts",)
