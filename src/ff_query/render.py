"""
Rendering of a Query into SQL text.
"""

import re
from typing import TYPE_CHECKING

from .adapters import PLACEHOLDER

if TYPE_CHECKING:
    from .query import Query

# {name} with the cast a bind variable may carry in its own placeholder
CAST_PLACEHOLDER = re.compile(PLACEHOLDER.pattern + r"(::(?:numeric|uuid))?")


def render_sql(query: "Query") -> str:
    """
    Create the full text of the sql query, with placeholders.

    Clauses are always emitted in the order where, order by, limit, offset.
    """
    sql = query.base
    if query.conditions:
        sql = f"{sql} where {' and '.join(query.conditions)}"

    parts = [sql]
    if query.order_by_clauses:
        parts.append(f"order by {', '.join(query.order_by_clauses)}")
    if query.limit_value is not None:
        parts.append(f"limit {query.limit_value}")
    if query.offset_value is not None:
        parts.append(f"offset {query.offset_value}")

    return " ".join(parts)


def interpolate(query: "Query") -> str:
    """
    Render the query with every bind variable replaced by its literal value.

    Placeholders are substituted in a single pass, so text already inlined
    is never rewritten. Both ``{name}`` and the typed ``{name}::uuid`` form
    are replaced; braces naming no bind variable are left as they are.

    Useful only for debugging. Text values are not escaped, so the result
    must never be executed.
    """
    bind_variables = {bind_var.name: bind_var for bind_var in query.bind_variables}

    def replace(match: re.Match) -> str:
        bind_var = bind_variables.get(match.group(1))
        if bind_var is None:
            return match.group(0)
        if bind_var.sql == match.group(0):
            return bind_var.literal
        # A cast the caller wrote that is not the variant's own stays in place
        return bind_var.literal + (match.group(2) or "")

    return CAST_PLACEHOLDER.sub(replace, render_sql(query))
