"""
Unit tests for typed bind variables.
"""

from decimal import Decimal
from uuid import UUID

from ff_query import Numeric, Text, UniqueId, to_bind_variable

ORDER_ID = UUID("0d8c2e4a-8f0b-4b3e-9d3c-5a1f3c2b7e61")


class TestVariantSelection:
    """Test that the runtime type of a value picks the variant."""

    def test_uuid_binds_as_unique_id(self):
        assert to_bind_variable("id", ORDER_ID) == UniqueId("id", ORDER_ID)

    def test_numbers_bind_as_numeric(self):
        assert to_bind_variable("n", 5) == Numeric("n", 5)
        assert to_bind_variable("n", 2.5) == Numeric("n", 2.5)
        assert to_bind_variable("n", Decimal("10.25")) == Numeric("n", Decimal("10.25"))

    def test_strings_bind_as_text(self):
        assert to_bind_variable("status", "open") == Text("status", "open")

    def test_booleans_bind_as_lowercase_text(self):
        """bool is a Number subclass but must not bind as numeric."""
        assert to_bind_variable("flag", True) == Text("flag", "true")
        assert to_bind_variable("flag", False) == Text("flag", "false")

    def test_other_values_are_stringified(self):
        assert to_bind_variable("tags", ["a"]) == Text("tags", "['a']")

    def test_existing_bind_variable_is_renamed_keeping_variant(self):
        """Callers can force a variant, e.g. a numeric-looking string as a number."""
        forced = to_bind_variable("total", Numeric("ignored", Decimal("3")))
        assert forced == Numeric("total", Decimal("3"))


class TestPlaceholders:
    """Test placeholder syntax and literal rendering per variant."""

    def test_numeric(self):
        var = Numeric("amount", 42)
        assert var.token == "{amount}"
        assert var.sql == "{amount}::numeric"
        assert var.literal == "42"
        assert var.to_parameter() == 42

    def test_text(self):
        var = Text("status", "open")
        assert var.sql == "{status}"
        assert var.literal == "'open'"
        assert var.to_parameter() == "open"

    def test_text_literal_is_not_escaped(self):
        assert Text("name", "O'Reilly").literal == "'O'Reilly'"

    def test_unique_id(self):
        var = UniqueId("id", ORDER_ID)
        assert var.sql == "{id}::uuid"
        assert var.literal == f"'{ORDER_ID}'::uuid"
        assert var.to_parameter() == str(ORDER_ID)
