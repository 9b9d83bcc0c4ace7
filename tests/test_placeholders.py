from __future__ import annotations

import unittest

from library_db.core.errors import ParameterCountError
from library_db.core.placeholders import TranslatedQuery, count_markers, marker_positions, translate
from library_db.ports.db_api.dialects import Dialect, PostgresDialect, SQLiteDialect


class _InvalidDialect(Dialect):
    paramstyle = "invalid"


class _NumericDialect(Dialect):
    paramstyle = "numeric"


class TranslateTests(unittest.TestCase):
    def test_rewrites_markers_in_order(self) -> None:
        query = translate(
            "SELECT * FROM books WHERE quantity > ? AND title ILIKE ?",
            [0, "%foo%"],
        )

        self.assertEqual(
            query.text, "SELECT * FROM books WHERE quantity > $1 AND title ILIKE $2"
        )
        self.assertEqual(query.values, [0, "%foo%"])

    def test_update_statement(self) -> None:
        text, values = translate("UPDATE books SET quantity = ? WHERE id = ?", [5, 10])

        self.assertEqual(text, "UPDATE books SET quantity = $1 WHERE id = $2")
        self.assertEqual(values, [5, 10])

    def test_no_params_returns_text_unchanged(self) -> None:
        sql = "SELECT COUNT(*) AS total FROM students"

        self.assertEqual(translate(sql), TranslatedQuery(sql, []))
        self.assertEqual(translate(sql, []), TranslatedQuery(sql, []))
        self.assertEqual(translate(sql, ()), TranslatedQuery(sql, []))

    def test_no_params_skips_scanning(self) -> None:
        sql = "SELECT '?' AS q, ? AS stray"

        self.assertEqual(translate(sql, None).text, sql)

    def test_values_are_copied_into_a_list(self) -> None:
        params = (1, "two", None)
        query = translate("INSERT INTO t (a, b, c) VALUES (?, ?, ?)", params)

        self.assertEqual(query.text, "INSERT INTO t (a, b, c) VALUES ($1, $2, $3)")
        self.assertEqual(query.values, [1, "two", None])
        self.assertIsInstance(query.values, list)

    def test_many_markers_use_multi_digit_numbers(self) -> None:
        sql = ", ".join("?" for _ in range(12))
        query = translate(sql, list(range(12)))

        self.assertEqual(query.text, ", ".join(f"${i}" for i in range(1, 13)))

    def test_values_are_never_interpolated(self) -> None:
        payload = "x'; DROP TABLE books; --"
        query = translate("SELECT * FROM books WHERE title = ?", [payload])

        self.assertNotIn(payload, query.text)
        self.assertEqual(query.values, [payload])

    def test_count_mismatch_raises(self) -> None:
        with self.assertRaises(ParameterCountError) as ctx:
            translate("SELECT * FROM books WHERE id = ? AND author_id = ?", [1])

        self.assertEqual(ctx.exception.expected, 2)
        self.assertEqual(ctx.exception.received, 1)
        self.assertIsInstance(ctx.exception, ValueError)

    def test_extra_params_raise(self) -> None:
        with self.assertRaises(ParameterCountError):
            translate("SELECT * FROM books", [1])

    def test_string_params_rejected(self) -> None:
        with self.assertRaises(TypeError):
            translate("SELECT * FROM books WHERE title = ?", "abc")

    def test_dialect_controls_placeholder(self) -> None:
        sql = "SELECT * FROM t WHERE a = ? AND b = ?"

        self.assertEqual(translate(sql, [1, 2], PostgresDialect()).text, "SELECT * FROM t WHERE a = $1 AND b = $2")
        self.assertEqual(translate(sql, [1, 2], SQLiteDialect()).text, sql)
        self.assertEqual(translate(sql, [1, 2], _NumericDialect()).text, "SELECT * FROM t WHERE a = :1 AND b = :2")

    def test_invalid_paramstyle_raises(self) -> None:
        with self.assertRaises(ValueError):
            translate("SELECT ?", [1], _InvalidDialect())


class MarkerScanTests(unittest.TestCase):
    def test_skips_single_quoted_literals(self) -> None:
        query = translate("SELECT * FROM books WHERE title = 'Why?' AND id = ?", [3])

        self.assertEqual(query.text, "SELECT * FROM books WHERE title = 'Why?' AND id = $1")

    def test_doubled_quote_stays_inside_literal(self) -> None:
        sql = "SELECT 'it''s ?' AS a, ? AS b"

        self.assertEqual(count_markers(sql), 1)
        self.assertEqual(translate(sql, [1]).text, "SELECT 'it''s ?' AS a, $1 AS b")

    def test_escape_string_backslash_quote(self) -> None:
        sql = "SELECT E'a\\'?' AS a, ? AS b"

        self.assertEqual(count_markers(sql), 1)

    def test_skips_quoted_identifiers(self) -> None:
        self.assertEqual(count_markers('SELECT "odd?col" FROM t WHERE id = ?'), 1)

    def test_skips_comments(self) -> None:
        sql = "SELECT id -- any?\nFROM t /* really? */ WHERE id = ?"

        self.assertEqual(marker_positions(sql), [len(sql) - 1])
        self.assertTrue(translate(sql, [7]).text.endswith("WHERE id = $1"))

    def test_skips_dollar_quoted_bodies(self) -> None:
        self.assertEqual(count_markers("SELECT $$a?b$$, $fn$c?$fn$, ?"), 1)

    def test_positional_dollar_reference_is_not_a_quote(self) -> None:
        self.assertEqual(count_markers("SELECT $1, ?"), 1)

    def test_unterminated_literal_consumes_rest(self) -> None:
        self.assertEqual(count_markers("SELECT ? WHERE x = 'open ?"), 1)

    def test_positions_are_offsets(self) -> None:
        self.assertEqual(marker_positions("? ??"), [0, 2, 3])


if __name__ == "__main__":
    unittest.main()
