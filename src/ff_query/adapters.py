"""
Parameter style adapters for database drivers.

Queries render placeholders as ``{name}`` tokens. Drivers expect their own
paramstyle, so the rendered SQL and bind variables are converted just before
execution:

- 'named':      %(name)s with a dict of params (psycopg, psycopg2)
- 'positional': $1, $2 with a list of params (asyncpg)
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence, Tuple, Union

from .bind import BindVariable
from .exceptions import UnsupportedParamStyle

PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


class BindAdapter(ABC):
    """
    Abstract base class for driver parameter adapters.
    """

    param_style: str

    @abstractmethod
    def convert(
        self, sql: str, bind_variables: Sequence[BindVariable]
    ) -> Tuple[str, Union[List[Any], Dict[str, Any]]]:
        """
        Convert rendered SQL and bind variables to the driver's format.

        Args:
            sql: SQL with {name} placeholders
            bind_variables: Bind variables referenced by the SQL

        Returns:
            Tuple of (converted_sql, params)
        """
        pass


class NamedAdapter(BindAdapter):
    """Adapter for pyformat drivers (psycopg, psycopg2)."""

    param_style = "named"

    def convert(
        self, sql: str, bind_variables: Sequence[BindVariable]
    ) -> Tuple[str, Dict[str, Any]]:
        """Convert {name} to %(name)s, escaping literal % signs."""
        names = {bind_var.name for bind_var in bind_variables}

        def replace(match: re.Match) -> str:
            name = match.group(1)
            if name in names:
                return f"%({name})s"
            return match.group(0)

        converted = PLACEHOLDER.sub(replace, sql.replace("%", "%%"))
        params = {bind_var.name: bind_var.to_parameter() for bind_var in bind_variables}
        return converted, params


class PositionalAdapter(BindAdapter):
    """Adapter for drivers using numbered parameters (asyncpg)."""

    param_style = "positional"

    def convert(
        self, sql: str, bind_variables: Sequence[BindVariable]
    ) -> Tuple[str, List[Any]]:
        """Convert {name} to $n, numbered by bind order."""
        positions = {bind_var.name: i for i, bind_var in enumerate(bind_variables, 1)}

        def replace(match: re.Match) -> str:
            position = positions.get(match.group(1))
            if position is None:
                return match.group(0)
            return f"${position}"

        converted = PLACEHOLDER.sub(replace, sql)
        params = [bind_var.to_parameter() for bind_var in bind_variables]
        return converted, params


_ADAPTERS = {
    "named": NamedAdapter,
    "pyformat": NamedAdapter,
    "positional": PositionalAdapter,
    "asyncpg": PositionalAdapter,
}


def get_adapter(style: str) -> BindAdapter:
    """
    Get the adapter for a driver parameter style.

    Raises:
        UnsupportedParamStyle: If no adapter handles the style
    """
    adapter_class = _ADAPTERS.get(style.lower())
    if adapter_class is None:
        raise UnsupportedParamStyle(style, sorted(_ADAPTERS))
    return adapter_class()
