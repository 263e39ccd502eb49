"""
Typed bind variables.

Each variant knows its placeholder syntax (including the Postgres cast the
driver needs to infer the parameter type) and how to render itself as a
literal for debug output:

- Numeric:  {name}::numeric  ->  42
- Text:     {name}           ->  'open'
- UniqueId: {name}::uuid     ->  '6f1c...'::uuid
"""

from dataclasses import dataclass
from numbers import Number
from typing import Any, Union
from uuid import UUID


@dataclass(frozen=True)
class Numeric:
    """A numeric bind variable (int, float, Decimal, ...)."""

    name: str
    value: Number

    @property
    def token(self) -> str:
        return f"{{{self.name}}}"

    @property
    def sql(self) -> str:
        return f"{self.token}::numeric"

    @property
    def literal(self) -> str:
        return str(self.value)

    def to_parameter(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Text:
    """A text bind variable."""

    name: str
    value: str

    @property
    def token(self) -> str:
        return f"{{{self.name}}}"

    @property
    def sql(self) -> str:
        return self.token

    @property
    def literal(self) -> str:
        # No escaping: debug output only
        return f"'{self.value}'"

    def to_parameter(self) -> Any:
        return self.value


@dataclass(frozen=True)
class UniqueId:
    """A uuid bind variable."""

    name: str
    value: UUID

    @property
    def token(self) -> str:
        return f"{{{self.name}}}"

    @property
    def sql(self) -> str:
        return f"{self.token}::uuid"

    @property
    def literal(self) -> str:
        return f"'{self.value}'::uuid"

    def to_parameter(self) -> Any:
        return str(self.value)


BindVariable = Union[Numeric, Text, UniqueId]


def to_bind_variable(name: str, value: Any) -> BindVariable:
    """
    Pick the bind variable variant for a value based on its runtime type.

    Args:
        name: Final (already unique) bind variable name
        value: Value to bind. A BindVariable is re-keyed under ``name``,
            keeping its variant, so callers can force a type explicitly.

    Returns:
        Numeric for numbers, UniqueId for UUIDs, Text for everything else
    """
    if isinstance(value, (Numeric, Text, UniqueId)):
        return type(value)(name, value.value)
    if isinstance(value, UUID):
        return UniqueId(name, value)
    # bool is a Number in Python but binds as 'true'/'false'
    if isinstance(value, bool):
        return Text(name, str(value).lower())
    if isinstance(value, Number):
        return Numeric(name, value)
    if isinstance(value, str):
        return Text(name, value)
    return Text(name, str(value))
