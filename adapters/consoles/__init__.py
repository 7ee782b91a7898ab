"""Interactive client command builders, one per SQL engine."""

from __future__ import annotations

from typing import Dict, Type

from adapters.base import UnsupportedConsole
from adapters.consoles.base import Console, ConsoleCommand, UriLike, parse_uri
from adapters.consoles.mysql import MySQLConsole
from adapters.consoles.postgres import PostgresConsole, connection_string
from adapters.consoles.sqlite import SQLiteConsole

CONSOLES: Dict[str, Type[Console]] = {
    "postgres": PostgresConsole,
    "postgresql": PostgresConsole,
    "mysql": MySQLConsole,
    "mysql2": MySQLConsole,
    "sqlite": SQLiteConsole,
}


def for_uri(uri: UriLike) -> Console:
    parsed = parse_uri(uri)
    scheme = (parsed.scheme or "").lower()
    console_class = CONSOLES.get(scheme)
    if console_class is None:
        raise UnsupportedConsole(f"No console available for scheme: {scheme or '<none>'}")
    return console_class(parsed)


__all__ = [
    "CONSOLES",
    "Console",
    "ConsoleCommand",
    "MySQLConsole",
    "PostgresConsole",
    "SQLiteConsole",
    "connection_string",
    "for_uri",
]
