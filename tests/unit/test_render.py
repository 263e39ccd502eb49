"""
Unit tests for rendering and debug interpolation.
"""

from ff_query import NullLogger, Query, reset_settings
from ff_query.render import interpolate, render_sql


class TestRenderSql:
    """Test the parameterized rendering."""

    def test_base_only(self, orders):
        assert render_sql(orders) == "select * from orders"

    def test_full_query(self, orders):
        query = (
            orders.equals("status", "open")
            .greater_than("total", 10)
            .order_by("created_at desc")
            .limit(25)
            .offset(50)
        )
        assert render_sql(query) == (
            "select * from orders where status = {status} and total > {total}::numeric"
            " order by created_at desc limit 25 offset 50"
        )

    def test_sql_matches_render_without_debug(self, orders):
        query = orders.equals("status", "open")
        assert query.sql() == query.render()


class TestInterpolate:
    """Test debug interpolation."""

    def test_uuid_is_quoted_and_cast(self, orders, order_id):
        sql = orders.equals("id", order_id).interpolate()
        assert sql == f"select * from orders where id = '{order_id}'::uuid"
        assert "{id}" not in sql

    def test_numeric_is_bare(self, orders):
        sql = orders.in_("id", [1, 2]).interpolate()
        assert sql == "select * from orders where id in (1, 2)"

    def test_text_is_quoted(self, orders):
        assert orders.text("name", "bob").interpolate() == "select * from orders where name = trim('bob')"

    def test_text_is_not_escaped(self, orders):
        sql = orders.equals("name", "O'Reilly").interpolate()
        assert sql == "select * from orders where name = 'O'Reilly'"

    def test_explicit_binds_are_interpolated(self, orders):
        sql = orders.bind("since", "2024-01-01").and_("created_at > {since}::date").interpolate()
        assert sql == "select * from orders where created_at > '2024-01-01'::date"

    def test_interpolate_function_matches_method(self, orders):
        query = orders.equals("status", "open")
        assert interpolate(query) == query.interpolate()

    def test_bare_token_of_numeric_bind(self):
        sql = Query("select * from t").bind("n", 5).and_("qty > {n}").interpolate()
        assert sql == "select * from t where qty > 5"

    def test_bare_token_of_uuid_bind(self, orders, order_id):
        sql = orders.bind("ref", order_id).and_("parent_id = {ref}").interpolate()
        assert sql == f"select * from orders where parent_id = '{order_id}'::uuid"

    def test_numeric_bind_with_explicit_cast(self):
        sql = Query("select * from t").bind("n", 5).and_("qty > {n}::numeric").interpolate()
        assert sql == "select * from t where qty > 5"

    def test_inlined_text_is_not_rewritten(self, orders):
        """A value that looks like another placeholder stays as bound."""
        sql = orders.equals("a", "{b}").equals("b", "x").interpolate()
        assert sql == "select * from orders where a = '{b}' and b = 'x'"

    def test_unknown_tokens_are_left_alone(self):
        sql = Query("select '{missing}'").bind("n", 1).interpolate()
        assert sql == "select '{missing}'"


class TestDebugOutput:
    """Test the debug side channel."""

    def test_no_output_without_debug(self, orders, capture_logger):
        query = Query("select * from orders", logger=capture_logger).equals("status", "open")
        query.render()
        assert capture_logger.entries == []

    def test_debug_logs_interpolated_sql(self, orders, capture_logger):
        query = orders.equals("status", "open").with_debugging(capture_logger)

        sql = query.render()

        assert sql == "select * from orders where status = {status}"
        assert len(capture_logger.entries) == 1
        entry = capture_logger.entries[0]
        assert entry["event"] == "query.interpolated"
        assert entry["log_level"] == "debug"
        assert entry["sql"] == "select * from orders where status = 'open'"

    def test_debug_flag_survives_further_building(self, orders, capture_logger):
        query = orders.with_debugging(capture_logger).equals("status", "open").limit(1)
        query.render()
        assert capture_logger.entries[0]["sql"] == "select * from orders where status = 'open' limit 1"

    def test_sql_never_logs(self, orders, capture_logger):
        orders.with_debugging(capture_logger).sql()
        assert capture_logger.entries == []

    def test_global_debug_setting(self, orders, capture_logger, monkeypatch):
        monkeypatch.setenv("FF_QUERY_DEBUG", "true")
        reset_settings()

        Query("select 1", logger=capture_logger).render()

        assert capture_logger.entries[0]["sql"] == "select 1"

    def test_debug_with_default_logger(self, orders, monkeypatch):
        monkeypatch.setenv("FF_QUERY_LOG_FORMAT", "null")
        reset_settings()

        # Falls back to get_logger("ff_query"), here a NullLogger
        assert orders.with_debugging().render() == "select * from orders"

    def test_with_debugging_keeps_existing_logger(self, orders):
        logger = NullLogger("custom")
        query = Query("select 1", logger=logger).with_debugging()
        assert query.debug is True
        assert query.logger is logger
