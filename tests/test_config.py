"""Tests for environment-driven configuration."""

from __future__ import annotations

import os
import unittest
from pathlib import Path
from unittest.mock import patch

from video_rental import config
from video_rental.db.codegen import DEFAULT_SKIP_INDEX_PATTERNS, SqlSchemaOptions


class TestCodegenConfig(unittest.TestCase):
    def test_defaults(self):
        env = {k: "" for k in (
            "VIDEO_RENTAL_STRICT_MODE", "VIDEO_RENTAL_INCLUDE_INDEXES",
            "VIDEO_RENTAL_INCLUDE_TIMESTAMPS", "VIDEO_RENTAL_INCLUDE_PRAGMAS",
            "VIDEO_RENTAL_EXCLUDE_SCHEMAS",
        )}
        with patch.dict(os.environ, env):
            cfg = config.get_codegen_config()
        self.assertEqual(cfg, config.CodegenConfig())
        self.assertTrue(cfg.use_strict_mode)
        self.assertEqual(cfg.exclude_schemas, ())

    def test_overrides(self):
        env = {
            "VIDEO_RENTAL_STRICT_MODE": "no",
            "VIDEO_RENTAL_INCLUDE_INDEXES": "0",
            "VIDEO_RENTAL_INCLUDE_TIMESTAMPS": "TRUE",
            "VIDEO_RENTAL_INCLUDE_PRAGMAS": "false",
            "VIDEO_RENTAL_EXCLUDE_SCHEMAS": " HealthResponse , ,CustomerCreate",
        }
        with patch.dict(os.environ, env):
            cfg = config.get_codegen_config()
        self.assertFalse(cfg.use_strict_mode)
        self.assertFalse(cfg.include_indexes)
        self.assertTrue(cfg.include_timestamps)
        self.assertFalse(cfg.include_file_pragmas)
        self.assertEqual(cfg.exclude_schemas, ("HealthResponse", "CustomerCreate"))

    def test_to_options(self):
        cfg = config.CodegenConfig(use_strict_mode=False, exclude_schemas=("Video",))
        options = cfg.to_options()
        self.assertIsInstance(options, SqlSchemaOptions)
        self.assertFalse(options.use_strict_mode)
        self.assertEqual(options.exclude_schemas, ("Video",))
        self.assertEqual(options.include_schemas, ())
        self.assertEqual(options.skip_index_patterns, DEFAULT_SKIP_INDEX_PATTERNS)


class TestPaths(unittest.TestCase):
    def test_defaults(self):
        env = {"VIDEO_RENTAL_DB_PATH": "", "VIDEO_RENTAL_OPENAPI_PATH": "",
               "VIDEO_RENTAL_SCHEMA_PATH": ""}
        with patch.dict(os.environ, env):
            root = config.get_repo_root()
            self.assertEqual(config.get_db_path(), root / "data" / "video-rental.db")
            self.assertEqual(config.get_schema_output_path(), root / "database" / "schema.sql")
            self.assertTrue(config.get_openapi_path().is_file())

    def test_overrides(self):
        env = {"VIDEO_RENTAL_DB_PATH": "/tmp/x.db", "VIDEO_RENTAL_OPENAPI_PATH": "/tmp/api.json",
               "VIDEO_RENTAL_SCHEMA_PATH": "/tmp/out.sql"}
        with patch.dict(os.environ, env):
            self.assertEqual(config.get_db_path(), Path("/tmp/x.db"))
            self.assertEqual(config.get_openapi_path(), Path("/tmp/api.json"))
            self.assertEqual(config.get_schema_output_path(), Path("/tmp/out.sql"))
