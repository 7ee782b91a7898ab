import os
from pathlib import Path


def load_environments(env_path: str = ".env", override: bool = False) -> None:
    env_file = Path(env_path)
    if not env_file.exists():
        return

    for raw_line in env_file.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export ") :]
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip("'").strip('"')
        if key and (override or key not in os.environ):
            os.environ[key] = value


def env_list(name: str, default: str = "") -> list:
    # Comma separated; blank entries dropped.
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]
