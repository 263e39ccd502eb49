"""
ff-query: Immutable, parameterized SQL query building for Fenixflow applications.

Features:
- Optional-predicate filters that drop out when their value is None
- Automatic, collision-free bind variable naming (qualified and JSON path columns)
- Typed bind variables with Postgres casts (::numeric, ::uuid)
- Debug interpolation through structlog
- Conversion to psycopg (named) and asyncpg (positional) parameter styles
"""

# Version is read from package metadata (pyproject.toml is the single source of truth)
try:
    from importlib.metadata import version

    __version__ = version("ff-query")
except Exception:
    __version__ = "0.1.0"

from .adapters import BindAdapter, NamedAdapter, PositionalAdapter, get_adapter
from .bind import BindVariable, Numeric, Text, UniqueId, to_bind_variable
from .exceptions import (
    ConfigurationError,
    DuplicateBindVariable,
    FFQueryError,
    UnsupportedParamStyle,
)
from .functions import LOWER, TRIM, Custom, Function, Lower, Trim, wrap
from .log import CaptureLogger, JSONQueryLogger, NullLogger, QueryLogger, get_logger
from .naming import simplify_name, unique_bind_name
from .query import Query
from .settings import QuerySettings, get_settings, reset_settings

__all__ = [
    # Query builder
    "Query",
    # Bind variables
    "BindVariable",
    "Numeric",
    "Text",
    "UniqueId",
    "to_bind_variable",
    "simplify_name",
    "unique_bind_name",
    # Function wrappers
    "Function",
    "Lower",
    "Trim",
    "Custom",
    "LOWER",
    "TRIM",
    "wrap",
    # Driver adapters
    "BindAdapter",
    "NamedAdapter",
    "PositionalAdapter",
    "get_adapter",
    # Logging
    "QueryLogger",
    "JSONQueryLogger",
    "NullLogger",
    "CaptureLogger",
    "get_logger",
    # Settings
    "QuerySettings",
    "get_settings",
    "reset_settings",
    # Exceptions
    "FFQueryError",
    "DuplicateBindVariable",
    "UnsupportedParamStyle",
    "ConfigurationError",
]
