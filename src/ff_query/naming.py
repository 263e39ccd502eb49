"""
Bind variable name generation.

Column expressions make friendly placeholder names, but they can be table
qualified (``orders.status``) or JSON paths (``data->>'status'``), neither
of which is legal inside a placeholder, and the same column is often bound
more than once in a query.
"""

import re
from typing import Collection

JSON_FIELD = re.compile(r"^.*->>'.*'$")


def simplify_name(name: str) -> str:
    """
    Reduce a column expression to a placeholder-safe name.

    - ``orders.Status`` -> ``status``
    - ``data->>'status'`` -> ``data_status``
    """
    idx = name.rfind(".")
    simple_name = (name[idx + 1 :] if idx > 0 else name).lower().strip()

    # translate "->>'<json_field>'" to "_<json_field>"
    if JSON_FIELD.match(simple_name):
        return simple_name.replace("'", "").replace("->>", "_", 1)
    return simple_name


def unique_bind_name(name: str, existing: Collection[str]) -> str:
    """
    Generate a unique, as friendly as possible, bind variable name.

    Args:
        name: Preferred name (column expression); used as-is once simplified
            if nothing is bound under it yet
        existing: Names already bound on the query

    Returns:
        A name not in ``existing``. On collision a numeric suffix is appended,
        starting at ``len(existing) + 1`` and counting up. At most
        ``len(existing) + 1`` suffixes are tried, so one of them is free.
    """
    simple_name = simplify_name(name)
    if simple_name not in existing:
        return simple_name

    suffix = len(existing) + 1
    while f"{simple_name}{suffix}" in existing:
        suffix += 1
    return f"{simple_name}{suffix}"
