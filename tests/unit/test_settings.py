import os

import pytest

from config.settings import AdapterOptions, load_adapter_options
from utils.env_loader import load_environments

ENV_KEYS = ("MODEL_ADAPTER_TYPE", "MODEL_ADAPTER_URI", "MODEL_ADAPTER_EXTENSIONS", "DATABASE_URL")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


def test_options_from_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# adapter\n"
        "MODEL_ADAPTER_TYPE=sql\n"
        "export MODEL_ADAPTER_URI='postgres://localhost/app'\n"
        'MODEL_ADAPTER_EXTENSIONS="pg_json, ,pg_array"\n',
        encoding="utf-8",
    )
    options = load_adapter_options(str(env_file))
    assert options == AdapterOptions(type="sql", uri="postgres://localhost/app", extension=["pg_json", "pg_array"])


def test_environment_wins_over_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("MODEL_ADAPTER_TYPE=sql\n", encoding="utf-8")
    monkeypatch.setenv("MODEL_ADAPTER_TYPE", "memory")
    assert load_adapter_options(str(env_file)).type == "memory"


def test_database_url_fallback(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite://db/app.sqlite3")
    options = load_adapter_options(str(tmp_path / "missing.env"))
    assert options.uri == "sqlite://db/app.sqlite3"
    assert options.type is None
    assert options.extension == []


def test_blank_values_become_none():
    assert AdapterOptions(type="  ", uri="").type is None
    assert AdapterOptions(type=" sql ", extension=None).type == "sql"


def test_load_environments_override(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("MODEL_ADAPTER_TYPE=sql\n", encoding="utf-8")
    monkeypatch.setenv("MODEL_ADAPTER_TYPE", "memory")
    load_environments(str(env_file), override=True)
    assert os.environ["MODEL_ADAPTER_TYPE"] == "sql"
