"""
Central configuration loader.
Reads from environment variables (via .env); every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# ---------------------------------------------------------------------------
# Load .env from repo root (if present)
# ---------------------------------------------------------------------------
_REPO_ROOT = Path(__file__).resolve().parents[1]
_PACKAGE_DIR = Path(__file__).resolve().parent
load_dotenv(_REPO_ROOT / ".env")


def _get(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(key, default)


def _get_bool(key: str, default: bool) -> bool:
    val = _get(key)
    if val is None or not val.strip():
        return default
    return val.strip().lower() in ("1", "true", "yes")


def _get_list(key: str) -> tuple[str, ...]:
    val = _get(key, "") or ""
    return tuple(part.strip() for part in val.split(",") if part.strip())


# ---------------------------------------------------------------------------
# Schema code generation
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class CodegenConfig:
    use_strict_mode: bool = True
    include_indexes: bool = True
    include_timestamps: bool = True
    include_file_pragmas: bool = True
    exclude_schemas: tuple[str, ...] = field(default_factory=tuple)

    def to_options(self):
        from video_rental.db.codegen import SqlSchemaOptions
        return SqlSchemaOptions(
            include_file_pragmas=self.include_file_pragmas,
            include_timestamps=self.include_timestamps,
            include_indexes=self.include_indexes,
            use_strict_mode=self.use_strict_mode,
            exclude_schemas=self.exclude_schemas,
        )


def get_codegen_config() -> CodegenConfig:
    # UUID identifiers are assigned by the repositories, hence strict mode by default
    return CodegenConfig(
        use_strict_mode=_get_bool("VIDEO_RENTAL_STRICT_MODE", True),
        include_indexes=_get_bool("VIDEO_RENTAL_INCLUDE_INDEXES", True),
        include_timestamps=_get_bool("VIDEO_RENTAL_INCLUDE_TIMESTAMPS", True),
        include_file_pragmas=_get_bool("VIDEO_RENTAL_INCLUDE_PRAGMAS", True),
        exclude_schemas=_get_list("VIDEO_RENTAL_EXCLUDE_SCHEMAS"),
    )


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
def get_repo_root() -> Path:
    return _REPO_ROOT


def get_db_path() -> Path:
    override = _get("VIDEO_RENTAL_DB_PATH")
    return Path(override) if override else _REPO_ROOT / "data" / "video-rental.db"


def get_openapi_path() -> Path:
    override = _get("VIDEO_RENTAL_OPENAPI_PATH")
    return Path(override) if override else _PACKAGE_DIR / "domain" / "openapi.yaml"


def get_schema_output_path() -> Path:
    override = _get("VIDEO_RENTAL_SCHEMA_PATH")
    return Path(override) if override else _REPO_ROOT / "database" / "schema.sql"
