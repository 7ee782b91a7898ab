from __future__ import annotations

from adapters.consoles.base import Console, UriLike


class PostgresConsole(Console):
    password_env = "PGPASSWORD"

    def render(self) -> str:
        return f"psql -h {self.host} -d {self.database} -p {self.port} -U {self.user}"


def connection_string(uri: UriLike) -> str:
    return PostgresConsole(uri).connection_string()
