"""Access to OpenAPI description documents.

The loader reads a JSON or YAML document and exposes its component schemas,
which is all the schema code generator needs. ``OpenApiDocument`` is a plain,
caller-owned value; ``OpenApiSpecCache`` is an explicit cache for callers that
read the same document repeatedly.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import yaml

logger = logging.getLogger(__name__)


class LoadError(Exception):
    """Raised when an OpenAPI document is missing, unreadable or malformed."""

    def __init__(self, path: Union[str, Path], cause: BaseException):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Failed to load OpenAPI schemas from {self.path}: {cause}")


@dataclass(frozen=True)
class Operation:
    path: str
    method: str
    operation: dict[str, Any]


@dataclass
class OpenApiDocument:
    """A parsed OpenAPI document."""

    spec: dict[str, Any] = field(default_factory=dict)

    @property
    def components(self) -> dict[str, Any]:
        components = self.spec.get("components")
        return components if isinstance(components, dict) else {}

    @property
    def schemas(self) -> dict[str, Any]:
        schemas = self.components.get("schemas")
        return schemas if isinstance(schemas, dict) else {}

    @property
    def paths(self) -> dict[str, Any]:
        paths = self.spec.get("paths")
        return paths if isinstance(paths, dict) else {}

    @property
    def info(self) -> dict[str, Any]:
        info = self.spec.get("info")
        return info if isinstance(info, dict) else {}

    @property
    def servers(self) -> list[Any]:
        servers = self.spec.get("servers")
        return servers if isinstance(servers, list) else []

    def schema_names(self) -> list[str]:
        return list(self.schemas)

    def get_schema(self, name: str) -> Optional[dict[str, Any]]:
        return self.schemas.get(name)

    def has_schema(self, name: str) -> bool:
        return name in self.schemas

    def operations(self) -> list[Operation]:
        """Flatten ``paths`` into one entry per (path, HTTP method)."""
        ops: list[Operation] = []
        for path, item in self.paths.items():
            if not isinstance(item, dict):
                continue
            for method, operation in item.items():
                if method == "parameters" or not isinstance(operation, dict):
                    continue
                ops.append(Operation(path=path, method=method.upper(), operation=operation))
        return ops


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def parse_document(text: str, suffix: str = "") -> Any:
    suffix = suffix.lower()
    if suffix == ".json":
        return json.loads(text)
    if suffix in (".yaml", ".yml"):
        return yaml.safe_load(text)
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return yaml.safe_load(text)


def _read(path: Path) -> tuple[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
        return text, parse_document(text, path.suffix)
    except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as exc:
        raise LoadError(path, exc) from exc


def load_openapi_document(path: Union[str, Path]) -> OpenApiDocument:
    path = Path(path)
    _, spec = _read(path)
    document = OpenApiDocument(spec if isinstance(spec, dict) else {})
    logger.debug("Loaded %s with %d schemas", path, len(document.schemas))
    return document


def load_components_schemas(path: Union[str, Path]) -> dict[str, Any]:
    """Return the ``components/schemas`` mapping of the document at ``path``."""
    return load_openapi_document(path).schemas


# ---------------------------------------------------------------------------
# Cache
# ---------------------------------------------------------------------------

class OpenApiSpecCache:
    """Lazily loads one document and keeps it until ``clear()`` is called."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)
        self._raw: Optional[str] = None
        self._document: Optional[OpenApiDocument] = None

    @property
    def path(self) -> Path:
        return self._path

    def is_available(self) -> bool:
        return self._path.is_file()

    def _load(self) -> None:
        raw, spec = _read(self._path)
        self._raw = raw
        self._document = OpenApiDocument(spec if isinstance(spec, dict) else {})

    def raw(self) -> str:
        if self._raw is None:
            self._load()
        return self._raw  # type: ignore[return-value]

    def document(self) -> OpenApiDocument:
        if self._document is None:
            self._load()
        return self._document  # type: ignore[return-value]

    def clear(self) -> None:
        self._raw = None
        self._document = None
