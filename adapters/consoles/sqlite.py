from __future__ import annotations

from adapters.consoles.base import Console


class SQLiteConsole(Console):
    def render(self) -> str:
        # sqlite://relative/file.db keeps the "host" as the first path segment.
        return f"sqlite3 {self.uri.netloc}{self.uri.path}"
