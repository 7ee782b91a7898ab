from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Union
from urllib.parse import ParseResult, SplitResult, unquote, urlsplit

UriLike = Union[str, SplitResult, ParseResult]


def parse_uri(uri: UriLike) -> SplitResult:
    if isinstance(uri, SplitResult):
        return uri
    if hasattr(uri, "geturl"):
        # ParseResult and friends: re-split the url they were built from.
        return urlsplit(uri.geturl())
    return urlsplit(str(uri or ""))


@dataclass(frozen=True)
class ConsoleCommand:
    command: str
    env: Dict[str, str] = field(default_factory=dict)


class Console:
    """Builds the shell invocation for an interactive database client.

    ``connection_string`` exports the decoded password into ``os.environ``
    (last write wins). ``command`` returns the same string paired with the
    environment it needs and leaves ``os.environ`` alone.
    """

    password_env: Optional[str] = None

    def __init__(self, uri: UriLike):
        self.uri = parse_uri(uri)

    @property
    def host(self) -> str:
        hostinfo = self.uri.netloc.rpartition("@")[2]
        if hostinfo.startswith("["):
            return hostinfo[: hostinfo.find("]") + 1]
        return hostinfo.partition(":")[0]

    @property
    def port(self) -> str:
        hostinfo = self.uri.netloc.rpartition("@")[2]
        if hostinfo.startswith("["):
            hostinfo = hostinfo[hostinfo.find("]") + 1 :]
        return hostinfo.partition(":")[2]

    @property
    def database(self) -> str:
        path = self.uri.path or ""
        return path[1:] if path.startswith("/") else path

    @property
    def user(self) -> str:
        return self.uri.username or ""

    @property
    def password(self) -> Optional[str]:
        raw = self.uri.password
        return unquote(raw) if raw else None

    def render(self) -> str:
        raise NotImplementedError

    def command(self) -> ConsoleCommand:
        env: Dict[str, str] = {}
        password = self.password
        if self.password_env and password is not None:
            env[self.password_env] = password
        return ConsoleCommand(command=self.render(), env=env)

    def connection_string(self) -> str:
        console_command = self.command()
        # No password: keep whatever credential is already exported.
        os.environ.update(console_command.env)
        return console_command.command
