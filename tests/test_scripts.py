"""Tests for the command-line scripts under ``scripts/``."""

from __future__ import annotations

import io
import json
import os
import shutil
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_ROOT / "scripts"))

import generate_schema  # noqa: E402
import init_db  # noqa: E402

from video_rental.db.database import Database  # noqa: E402

_CLEAN_ENV = {
    "VIDEO_RENTAL_STRICT_MODE": "",
    "VIDEO_RENTAL_INCLUDE_INDEXES": "",
    "VIDEO_RENTAL_INCLUDE_TIMESTAMPS": "",
    "VIDEO_RENTAL_INCLUDE_PRAGMAS": "",
    "VIDEO_RENTAL_EXCLUDE_SCHEMAS": "",
}

DOC = {
    "openapi": "3.0.0",
    "components": {
        "schemas": {
            "Customer": {
                "type": "object",
                "properties": {"email": {"type": "string", "format": "email"}},
                "required": ["email"],
            },
            "Rental": {
                "type": "object",
                "properties": {"customerId": {"type": "integer"}},
            },
        }
    },
}


def _run(main, argv) -> tuple[int, str, str]:
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue(), err.getvalue()


class _TmpDirCase(unittest.TestCase):
    def setUp(self):
        self.tmp = Path(tempfile.mkdtemp(prefix="scripts-test-"))
        self.env = patch.dict(os.environ, _CLEAN_ENV)
        self.env.start()

    def tearDown(self):
        self.env.stop()
        shutil.rmtree(self.tmp, ignore_errors=True)


class TestGenerateSchemaScript(_TmpDirCase):
    def setUp(self):
        super().setUp()
        self.doc = self.tmp / "api.json"
        self.doc.write_text(json.dumps(DOC), encoding="utf-8")

    def test_stdout(self):
        code, out, _ = _run(generate_schema.main, ["--openapi", str(self.doc), "--stdout"])
        self.assertEqual(code, 0)
        self.assertIn("CREATE TABLE customer (", out)
        self.assertIn("id TEXT PRIMARY KEY", out)
        self.assertIn("WITHOUT ROWID", out)

    def test_flags(self):
        code, out, _ = _run(generate_schema.main, [
            "--openapi", str(self.doc), "--stdout",
            "--no-strict", "--no-pragmas", "--no-indexes",
            "--table", "Customer=clients", "--exclude", "Rental",
        ])
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("CREATE TABLE clients ("))
        self.assertIn("id INTEGER PRIMARY KEY", out)
        self.assertNotIn("PRAGMA", out)
        self.assertNotIn("INDEX", out)
        self.assertNotIn("rental", out)

    def test_writes_output_file(self):
        output = self.tmp / "out" / "schema.sql"
        code, out, _ = _run(generate_schema.main,
                            ["--openapi", str(self.doc), "--output", str(output)])
        self.assertEqual(code, 0)
        self.assertIn("Found 2 schemas: Customer, Rental", out)
        self.assertIn(f"Schema written to: {output}", out)
        content = output.read_text(encoding="utf-8")
        self.assertIn("FOREIGN KEY (customer_id) REFERENCES customer(id)", content)
        self.assertIn(
            "CREATE UNIQUE INDEX IF NOT EXISTS idx_customer_email_unique ON customer(email);",
            content,
        )

    def test_environment_configures_defaults(self):
        with patch.dict(os.environ, {"VIDEO_RENTAL_STRICT_MODE": "false",
                                     "VIDEO_RENTAL_EXCLUDE_SCHEMAS": "Customer"}):
            code, out, _ = _run(generate_schema.main, ["--openapi", str(self.doc), "--stdout"])
        self.assertEqual(code, 0)
        self.assertNotIn("WITHOUT ROWID", out)
        self.assertNotIn("CREATE TABLE customer", out)
        self.assertIn("CREATE TABLE rental (", out)

    def test_missing_document(self):
        missing = self.tmp / "missing.yaml"
        code, _, err = _run(generate_schema.main, ["--openapi", str(missing), "--stdout"])
        self.assertEqual(code, 1)
        self.assertIn("Failed to generate database schema", err)
        self.assertIn(str(missing), err)

    def test_bad_table_mapping(self):
        with self.assertRaises(SystemExit):
            _run(generate_schema.main, ["--openapi", str(self.doc), "--table", "Customer"])

    def test_bundled_document(self):
        code, out, _ = _run(generate_schema.main, ["--stdout"])
        self.assertEqual(code, 0)
        self.assertIn("CREATE TABLE payment (", out)


class TestInitDbScript(_TmpDirCase):
    def test_init_only(self):
        db_path = self.tmp / "data" / "store.db"
        code, out, _ = _run(init_db.main, ["--db-path", str(db_path)])
        self.assertEqual(code, 0)
        self.assertTrue(db_path.exists())
        self.assertIn("Tables: customers, inventory, payments, rentals, videos", out)
        self.assertTrue(out.rstrip().endswith("Done."))

    def test_seed(self):
        db_path = self.tmp / "store.db"
        code, out, _ = _run(init_db.main, [
            "--db-path", str(db_path), "--seed", str(_ROOT / "data" / "seed.yaml"),
        ])
        self.assertEqual(code, 0)
        self.assertIn("Created video: The Matrix (3 copies)", out)

        db = Database(db_path)
        try:
            self.assertEqual(db.fetchone("SELECT COUNT(*) AS n FROM customers")["n"], 2)
            self.assertEqual(db.fetchone("SELECT COUNT(*) AS n FROM videos")["n"], 2)
            self.assertEqual(db.fetchone("SELECT COUNT(*) AS n FROM inventory")["n"], 5)
        finally:
            db.close()

    def test_seed_skips_bad_records(self):
        seed = self.tmp / "seed.yaml"
        seed.write_text(
            "customers:\n"
            "  - name: No Email\n"
            "videos:\n"
            "  - title: Stagecoach\n"
            "    genre: Western\n"
            "    rating: G\n"
            "    release_year: 1939\n"
            "    duration: 96\n",
            encoding="utf-8",
        )
        code, out, _ = _run(init_db.main, ["--db-path", str(self.tmp / "s.db"),
                                           "--seed", str(seed)])
        self.assertEqual(code, 0)
        self.assertIn("Skipping customer No Email", out)
        self.assertIn("Skipping video Stagecoach", out)

    def _seed_videos(self, videos_yaml: str) -> tuple[str, Database]:
        seed = self.tmp / "seed.yaml"
        seed.write_text("videos:\n" + videos_yaml, encoding="utf-8")
        db_path = self.tmp / "v.db"
        code, out, _ = _run(init_db.main, ["--db-path", str(db_path), "--seed", str(seed)])
        self.assertEqual(code, 0)
        return out, Database(db_path)

    def test_bad_copy_condition_leaves_no_video(self):
        out, db = self._seed_videos(
            "  - title: Mint Copy\n"
            "    genre: Drama\n"
            "    rating: PG\n"
            "    release_year: 2001\n"
            "    duration: 90\n"
            "    copies: 2\n"
            "    condition: Mint\n"
        )
        try:
            self.assertIn("Skipping video Mint Copy", out)
            self.assertEqual(db.fetchall("SELECT title FROM videos"), [])
            self.assertEqual(db.fetchall("SELECT id FROM inventory"), [])
        finally:
            db.close()

    def test_null_numbers_skip_record_and_continue(self):
        out, db = self._seed_videos(
            "  - title: No Year\n"
            "    genre: Drama\n"
            "    rating: PG\n"
            "    release_year: null\n"
            "    duration: 90\n"
            "  - title: Good One\n"
            "    genre: Comedy\n"
            "    rating: G\n"
            "    release_year: 2005\n"
            "    duration: 100\n"
            "    copies: 1\n"
        )
        try:
            self.assertIn("Skipping video No Year", out)
            self.assertIn("Created video: Good One (1 copies)", out)
            titles = [r["title"] for r in db.fetchall("SELECT title FROM videos")]
            self.assertEqual(titles, ["Good One"])
            self.assertEqual(len(db.fetchall("SELECT id FROM inventory")), 1)
        finally:
            db.close()

    def test_missing_seed_file(self):
        code, _, err = _run(init_db.main, ["--db-path", str(self.tmp / "s.db"),
                                           "--seed", str(self.tmp / "nope.yaml")])
        self.assertEqual(code, 1)
        self.assertIn("Failed to read seed file", err)
