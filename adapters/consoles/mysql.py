from __future__ import annotations

from adapters.consoles.base import Console


class MySQLConsole(Console):
    password_env = "MYSQL_PWD"

    def render(self) -> str:
        return f"mysql -h {self.host} -D {self.database} -P {self.port} -u {self.user}"
