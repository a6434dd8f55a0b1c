"""Naming and type-mapping helpers shared by the schema code generator."""

from __future__ import annotations

import json
import math
import re
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

SQLITE_TYPES = {
    "string": "TEXT",
    "integer": "INTEGER",
    "number": "REAL",
    "boolean": "INTEGER",
    "array": "TEXT",
    "object": "TEXT",
}

_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z]+)([A-Z][a-z])")
_REF_TAIL = re.compile(r"/([^/]+)$")


def to_snake_case(name: str) -> str:
    """Convert ``camelCase`` / ``PascalCase`` to ``snake_case``.

    Acronym runs split before their last capital when it starts a new word,
    so ``HTTPServer`` becomes ``http_server`` and ``mixedCASEfield`` becomes
    ``mixed_cas_efield``. Already snake_cased input is returned unchanged.
    """
    name = _LOWER_UPPER.sub(r"\1_\2", name)
    name = _ACRONYM_WORD.sub(r"\1_\2", name)
    return name.lower()


def has_enum(prop: Mapping[str, Any]) -> bool:
    """True when the property declares an ``enum`` list, even an empty one."""
    return isinstance(prop.get("enum"), list)


def sqlite_type(prop: Mapping[str, Any]) -> str:
    """Map an OpenAPI property schema to a SQLite column type."""
    if prop.get("$ref"):
        return "INTEGER"
    prop_type = prop.get("type")
    if prop_type == "string":
        return "TEXT"
    if has_enum(prop):
        return "TEXT"
    if prop_type in ("array", "object"):
        return "TEXT"
    if isinstance(prop_type, str):
        return SQLITE_TYPES.get(prop_type, "TEXT")
    return "TEXT"


def quote_literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def number_literal(value: Union[int, float]) -> str:
    """Render a number the way a JSON/JavaScript serializer prints it.

    Whole floats lose their fraction (``2.0`` -> ``2``), exponents carry no
    zero padding (``1e-07`` -> ``1e-7``) and plain decimal notation is used
    for exponents between -7 and 21, as in ``0.00001``.
    """
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    exp = int(exponent)
    if -7 < exp < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"


def default_clause(prop: Mapping[str, Any]) -> str:
    """Return the `` DEFAULT ...`` suffix for a property, or ``""``."""
    if "default" not in prop:
        return ""
    value = prop["default"]
    if isinstance(value, str):
        return f" DEFAULT {quote_literal(value)}"
    if value is None:
        return " DEFAULT NULL"
    if isinstance(value, bool):
        return " DEFAULT true" if value else " DEFAULT false"
    if isinstance(value, (dict, list)):
        return f" DEFAULT {quote_literal(json.dumps(value))}"
    if isinstance(value, (int, float)):
        return f" DEFAULT {number_literal(value)}"
    return f" DEFAULT {value}"


def table_from_ref(ref: str) -> Optional[str]:
    """``#/components/schemas/VideoCopy`` -> ``video_copy``."""
    match = _REF_TAIL.search(ref)
    return to_snake_case(match.group(1)) if match else None


def is_id_suffixed_integer(prop_name: str, prop: Mapping[str, Any]) -> bool:
    return prop_name.endswith("Id") and prop.get("type") == "integer"


def foreign_key_target(prop_name: str, prop: Mapping[str, Any]) -> Optional[str]:
    """Return the table a property references, or None.

    An explicit ``$ref`` wins; otherwise an integer ``fooId`` points at ``foo``.
    """
    ref = prop.get("$ref")
    if isinstance(ref, str) and ref:
        target = table_from_ref(ref)
        if target:
            return target
    if is_id_suffixed_integer(prop_name, prop):
        return to_snake_case(prop_name[:-2])
    return None
