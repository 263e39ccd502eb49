"""
Immutable SQL query builder.

Start from a base statement and chain filters; every call returns a new
Query and leaves the original untouched, so a shared base can be extended
independently by any number of callers:

    query = (
        Query("select * from orders")
        .equals("status", status)          # skipped when status is None
        .optional_in("id", ids)            # skipped when ids is None
        .order_by("created_at desc")
        .optional_limit(limit)
    )
    sql, params = query.to_driver("named")

Absent (None) values are the designed no-op path: they drop the filter
entirely rather than comparing against NULL.
"""

from operator import index
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Optional, Sequence, Union

from .adapters import get_adapter
from .bind import BindVariable, to_bind_variable
from .exceptions import DuplicateBindVariable
from .functions import TRIM, Function, wrap
from .log import SupportsDebug, get_logger
from .naming import unique_bind_name
from .render import interpolate, render_sql
from .settings import get_settings

Clauses = Union[str, Sequence[str], None]


@dataclass(frozen=True)
class Query:
    """
    A parameterized SQL query.

    Attributes:
        base: Starting SQL, e.g. "select * from orders"
        conditions: Boolean expressions ANDed into the where clause
        bind_variables: Typed values for every placeholder in conditions
        order_by_clauses: Expressions for the order by clause
        limit_value: Row limit, if any
        offset_value: Row offset, if any
        debug: Log the interpolated SQL whenever the query is rendered
        logger: Receives the interpolated SQL in debug mode
    """

    base: str
    conditions: tuple[str, ...] = ()
    bind_variables: tuple[BindVariable, ...] = ()
    order_by_clauses: tuple[str, ...] = ()
    limit_value: Optional[int] = None
    offset_value: Optional[int] = None
    debug: bool = False
    logger: Optional[SupportsDebug] = field(default=None, compare=False, repr=False)

    @property
    def bind_names(self) -> list[str]:
        return [bind_var.name for bind_var in self.bind_variables]

    # Comparison operators

    def equals(self, column: str, value: Any, **functions) -> "Query":
        return self.operation(column, "=", value, **functions)

    def optional_equals(self, column: str, value: Any, **functions) -> "Query":
        return self.optional_operation(column, "=", value, **functions)

    def not_equals(self, column: str, value: Any, **functions) -> "Query":
        return self.operation(column, "!=", value, **functions)

    def optional_not_equals(self, column: str, value: Any, **functions) -> "Query":
        return self.optional_operation(column, "!=", value, **functions)

    def less_than(self, column: str, value: Any, **functions) -> "Query":
        return self.operation(column, "<", value, **functions)

    def optional_less_than(self, column: str, value: Any, **functions) -> "Query":
        return self.optional_operation(column, "<", value, **functions)

    def less_than_or_equals(self, column: str, value: Any, **functions) -> "Query":
        return self.operation(column, "<=", value, **functions)

    def optional_less_than_or_equals(self, column: str, value: Any, **functions) -> "Query":
        return self.optional_operation(column, "<=", value, **functions)

    def greater_than(self, column: str, value: Any, **functions) -> "Query":
        return self.operation(column, ">", value, **functions)

    def optional_greater_than(self, column: str, value: Any, **functions) -> "Query":
        return self.optional_operation(column, ">", value, **functions)

    def greater_than_or_equals(self, column: str, value: Any, **functions) -> "Query":
        return self.operation(column, ">=", value, **functions)

    def optional_greater_than_or_equals(self, column: str, value: Any, **functions) -> "Query":
        return self.optional_operation(column, ">=", value, **functions)

    def operation(
        self,
        column: str,
        operator: str,
        value: Any,
        column_functions: Iterable[Function] = (),
        value_functions: Iterable[Function] = (),
    ) -> "Query":
        """
        Add the condition "<column> <operator> <placeholder>" and its bind variable.

        Args:
            column: Column expression, also used to name the bind variable
            operator: SQL comparison operator
            value: Value to bind; None leaves the query unchanged
            column_functions: Functions wrapped around the column, innermost first
            value_functions: Functions wrapped around the placeholder, innermost first

        Returns:
            New Query with one more condition and one more bind variable
        """
        if value is None:
            return self

        bind_var = to_bind_variable(unique_bind_name(column, self.bind_names), value)
        expr_column = wrap(column, column_functions)
        expr_value = wrap(bind_var.sql, value_functions)

        return replace(
            self,
            conditions=self.conditions + (f"{expr_column} {operator} {expr_value}",),
            bind_variables=self.bind_variables + (bind_var,),
        )

    def optional_operation(
        self,
        column: str,
        operator: str,
        value: Any,
        column_functions: Iterable[Function] = (),
        value_functions: Iterable[Function] = (),
    ) -> "Query":
        """Same as operation(), explicitly skipping the filter when value is None."""
        if value is None:
            return self
        return self.operation(column, operator, value, column_functions, value_functions)

    # Set membership

    def in_(
        self,
        column: str,
        values: Optional[Iterable[Any]],
        column_functions: Iterable[Function] = (),
        value_functions: Iterable[Function] = (),
    ) -> "Query":
        """
        Add "<column> in (<placeholders>)" with one bind variable per value.

        An empty list adds the condition "false" so the query matches
        nothing, instead of generating invalid SQL or matching everything.
        A single string is one value, not a sequence of characters.
        """
        if values is None:
            return self

        values = [values] if isinstance(values, str) else list(values)
        if not values:
            return replace(self, conditions=self.conditions + ("false",))

        value_functions = tuple(value_functions)
        names = self.bind_names
        bind_vars = []
        for i, value in enumerate(values):
            candidate = column if i == 0 else f"{column}{i + 1}"
            bind_var = to_bind_variable(unique_bind_name(candidate, names), value)
            names.append(bind_var.name)
            bind_vars.append(bind_var)

        placeholders = ", ".join(wrap(bind_var.sql, value_functions) for bind_var in bind_vars)
        condition = f"{wrap(column, column_functions)} in ({placeholders})"

        return replace(
            self,
            conditions=self.conditions + (condition,),
            bind_variables=self.bind_variables + tuple(bind_vars),
        )

    def optional_in(
        self,
        column: str,
        values: Optional[Iterable[Any]],
        column_functions: Iterable[Function] = (),
        value_functions: Iterable[Function] = (),
    ) -> "Query":
        """
        Skip when values is None; otherwise same as in_().

        An explicit empty list still means "match nothing".
        """
        if values is None:
            return self
        return self.in_(column, values, column_functions, value_functions)

    # Boolean combinators

    def and_(self, clauses: Clauses) -> "Query":
        """AND one or more raw clauses into the where clause."""
        if clauses is None:
            return self
        if isinstance(clauses, str):
            clauses = (clauses,)
        return replace(self, conditions=self.conditions + tuple(clauses))

    def or_(self, clauses: Clauses) -> "Query":
        """
        OR the clauses together and AND the group into the where clause.

        A single clause behaves exactly like and_().
        """
        if clauses is None:
            return self
        if isinstance(clauses, str):
            clauses = (clauses,)

        clauses = list(clauses)
        if not clauses:
            return self
        if len(clauses) == 1:
            return self.and_(clauses[0])
        return self.and_("(" + " or ".join(clauses) + ")")

    # Explicit binds

    def bind(self, name: str, value: Any) -> "Query":
        """
        Add a bind variable for use in hand written clauses.

        The name is used exactly as given, so it can be referenced as
        {name} in clauses passed to and_()/or_().

        Raises:
            DuplicateBindVariable: If a bind variable with this name exists
        """
        if value is None:
            return self
        if name in self.bind_names:
            raise DuplicateBindVariable(name)
        return replace(self, bind_variables=self.bind_variables + (to_bind_variable(name, value),))

    # Text, boolean and null helpers

    def text(
        self,
        column: str,
        value: Any,
        column_functions: Iterable[Function] = (),
        value_functions: Iterable[Function] = (TRIM,),
    ) -> "Query":
        """Equality on text, trimming the bound value by default."""
        return self.operation(column, "=", value, column_functions, value_functions)

    def optional_text(
        self,
        column: str,
        value: Any,
        column_functions: Iterable[Function] = (),
        value_functions: Iterable[Function] = (TRIM,),
    ) -> "Query":
        return self.optional_operation(column, "=", value, column_functions, value_functions)

    def boolean(self, column: str, value: Optional[bool]) -> "Query":
        if value is None:
            return self
        return self.and_(f"{column} is true" if value else f"{column} is false")

    def null_boolean(self, column: str, value: Optional[bool]) -> "Query":
        """True filters to non-null values, False to nulls."""
        if value is None:
            return self
        return self.and_(f"{column} is not null" if value else f"{column} is null")

    def is_null(self, column: str) -> "Query":
        return self.and_(f"{column} is null")

    def is_not_null(self, column: str) -> "Query":
        return self.and_(f"{column} is not null")

    # Ordering and pagination

    def order_by(self, clause: Optional[str]) -> "Query":
        if clause is None:
            return self
        return replace(self, order_by_clauses=self.order_by_clauses + (clause,))

    def limit(self, value: int) -> "Query":
        """Raises TypeError unless value is an integer."""
        return replace(self, limit_value=index(value))

    def optional_limit(self, value: Optional[int]) -> "Query":
        if value is None:
            return self
        return self.limit(value)

    def offset(self, value: int) -> "Query":
        """Raises TypeError unless value is an integer."""
        return replace(self, offset_value=index(value))

    def optional_offset(self, value: Optional[int]) -> "Query":
        if value is None:
            return self
        return self.offset(value)

    # Rendering

    def with_debugging(self, logger: Optional[SupportsDebug] = None) -> "Query":
        """
        Turn on debugging of this query.

        Args:
            logger: Where to send the interpolated SQL (default: ff_query logger)
        """
        return replace(self, debug=True, logger=logger or self.logger)

    def sql(self) -> str:
        """The sql text with placeholders. Never logs."""
        return render_sql(self)

    def interpolate(self) -> str:
        """
        The sql text with all bind values inlined, for easy inspection.

        Values are not escaped. Never execute the result.
        """
        return interpolate(self)

    def render(self) -> str:
        """
        The sql text with placeholders, logging the interpolated form first
        when debugging is enabled on the query or through FF_QUERY_DEBUG.
        """
        if self.debug or get_settings().debug:
            logger = self.logger or get_logger("ff_query")
            logger.debug("query.interpolated", sql=self.interpolate())
        return self.sql()

    def params(self) -> dict[str, Any]:
        """Driver-ready values keyed by bind variable name."""
        return {bind_var.name: bind_var.to_parameter() for bind_var in self.bind_variables}

    def to_driver(self, style: str = "named") -> tuple[str, Any]:
        """
        Render and convert to a database driver's parameter style.

        Args:
            style: 'named' (psycopg) or 'positional' (asyncpg)

        Returns:
            Tuple of (sql, params)
        """
        return get_adapter(style).convert(self.render(), self.bind_variables)

    def fetch_all(self, cursor, style: str = "named") -> list:
        """Execute on a DB-API cursor and return its rows as-is."""
        cursor.execute(*self.to_driver(style))
        return cursor.fetchall()
