from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[_\-\s]+")


def classify(value: str) -> str:
    """snake_case -> PascalCase, e.g. ``pg_json_thing_adapter`` -> ``PgJsonThingAdapter``.

    Each word is capitalized, so inner capitals are folded: ``mySql_adapter`` -> ``MysqlAdapter``.
    """
    parts = [part for part in _SEPARATORS.split(str(value)) if part]
    return "".join(part.capitalize() for part in parts)
