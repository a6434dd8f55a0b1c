"""Unit tests for the snake_case, type-mapping and foreign-key helpers."""

from __future__ import annotations

import unittest

from video_rental.db.naming import (
    default_clause,
    foreign_key_target,
    sqlite_type,
    table_from_ref,
    to_snake_case,
)


class TestToSnakeCase(unittest.TestCase):
    def test_camel_and_pascal(self):
        self.assertEqual(to_snake_case("camelCaseField"), "camel_case_field")
        self.assertEqual(to_snake_case("PascalCaseField"), "pascal_case_field")
        self.assertEqual(to_snake_case("Customer"), "customer")

    def test_already_snake_case_unchanged(self):
        self.assertEqual(to_snake_case("already_snake_case"), "already_snake_case")

    def test_acronyms(self):
        self.assertEqual(to_snake_case("HTTPServer"), "http_server")
        self.assertEqual(to_snake_case("customerID"), "customer_id")
        self.assertEqual(to_snake_case("APIDocumentation"), "api_documentation")

    def test_mixed_case_split_is_pinned(self):
        self.assertEqual(to_snake_case("mixedCASEfield"), "mixed_cas_efield")

    def test_idempotent(self):
        for name in ("camelCaseField", "HTTPServer", "mixedCASEfield", "a", "",
                     "already_snake", "Value_Objects.Money", "X1Y2"):
            once = to_snake_case(name)
            self.assertEqual(to_snake_case(once), once, name)


class TestSqliteType(unittest.TestCase):
    def test_type_table(self):
        cases = [
            ({"type": "string"}, "TEXT"),
            ({"type": "string", "format": "date-time"}, "TEXT"),
            ({"type": "string", "format": "uuid"}, "TEXT"),
            ({"type": "integer"}, "INTEGER"),
            ({"type": "number"}, "REAL"),
            ({"type": "boolean"}, "INTEGER"),
            ({"type": "array", "items": {"type": "string"}}, "TEXT"),
            ({"type": "object"}, "TEXT"),
            ({"$ref": "#/components/schemas/Video"}, "INTEGER"),
            ({"type": "integer", "enum": [1, 2]}, "TEXT"),
            ({"type": "integer", "enum": []}, "TEXT"),
            ({"type": "integer", "enum": "x"}, "INTEGER"),
            ({"type": "unknown_type"}, "TEXT"),
            ({}, "TEXT"),
        ]
        for prop, expected in cases:
            self.assertEqual(sqlite_type(prop), expected, prop)


class TestDefaultClause(unittest.TestCase):
    def test_no_default(self):
        self.assertEqual(default_clause({"type": "string"}), "")

    def test_string_quotes_doubled(self):
        self.assertEqual(default_clause({"default": "it's"}), " DEFAULT 'it''s'")

    def test_literals(self):
        self.assertEqual(default_clause({"default": 42}), " DEFAULT 42")
        self.assertEqual(default_clause({"default": 3.99}), " DEFAULT 3.99")
        self.assertEqual(default_clause({"default": True}), " DEFAULT true")
        self.assertEqual(default_clause({"default": False}), " DEFAULT false")
        self.assertEqual(default_clause({"default": None}), " DEFAULT NULL")

    def test_numbers_print_like_json(self):
        cases = [
            (2.0, "2"),
            (-0.0, "0"),
            (1e-7, "1e-7"),
            (1.5e-7, "1.5e-7"),
            (1e-5, "0.00001"),
            (0.1, "0.1"),
            (1e16, "10000000000000000"),
            (1e21, "1e+21"),
            (float("inf"), "Infinity"),
        ]
        for value, expected in cases:
            self.assertEqual(default_clause({"default": value}), f" DEFAULT {expected}", value)

    def test_json_defaults_are_quoted(self):
        self.assertEqual(default_clause({"default": ["a"]}), ' DEFAULT \'["a"]\'')


class TestForeignKeyTarget(unittest.TestCase):
    def test_ref_uses_last_segment(self):
        self.assertEqual(table_from_ref("#/components/schemas/VideoCopy"), "video_copy")
        self.assertEqual(
            foreign_key_target("owner", {"$ref": "#/components/schemas/StoreUser"}),
            "store_user",
        )

    def test_ref_without_slash(self):
        self.assertIsNone(table_from_ref("Customer"))
        self.assertIsNone(foreign_key_target("owner", {"$ref": "Customer"}))

    def test_ref_takes_precedence_over_suffix(self):
        prop = {"$ref": "#/components/schemas/Account", "type": "integer"}
        self.assertEqual(foreign_key_target("customerId", prop), "account")

    def test_id_suffix_requires_integer(self):
        self.assertEqual(foreign_key_target("customerId", {"type": "integer"}), "customer")
        self.assertEqual(foreign_key_target("videoCopyId", {"type": "integer"}), "video_copy")
        self.assertIsNone(foreign_key_target("customerId", {"type": "string"}))
        self.assertIsNone(foreign_key_target("customer_id", {"type": "integer"}))
        self.assertIsNone(foreign_key_target("paid", {"type": "integer"}))
