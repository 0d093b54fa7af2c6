"""Unit tests for environment-based configuration."""

import pytest

from mailinglist import config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        config.DB_URL_ENVVAR,
        config.STORE_TIMEOUT_ENVVAR,
        config.JSON_BIND_ENVVAR,
        config.GRPC_BIND_ENVVAR,
    ):
        monkeypatch.delenv(name, raising=False)


def test_db_url_is_required():
    with pytest.raises(config.DatabaseUrlNotSetError):
        config.get_db_url()


def test_empty_db_url_counts_as_missing(monkeypatch):
    monkeypatch.setenv(config.DB_URL_ENVVAR, "")
    with pytest.raises(config.DatabaseUrlNotSetError):
        config.get_db_url()


def test_db_url_from_env(monkeypatch):
    monkeypatch.setenv(config.DB_URL_ENVVAR, "sqlite+pysqlite:///list.db")
    assert config.get_db_url() == "sqlite+pysqlite:///list.db"


def test_store_timeout_defaults_to_one_second():
    assert config.get_store_timeout() == 1.0


def test_store_timeout_from_env(monkeypatch):
    monkeypatch.setenv(config.STORE_TIMEOUT_ENVVAR, "2.5")
    assert config.get_store_timeout() == 2.5


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_store_timeout_rejects_bad_values(monkeypatch, raw):
    monkeypatch.setenv(config.STORE_TIMEOUT_ENVVAR, raw)
    with pytest.raises(config.InvalidConfigError):
        config.get_store_timeout()


def test_json_bind_default_and_env(monkeypatch):
    assert config.get_json_bind() == "127.0.0.1:8080"
    monkeypatch.setenv(config.JSON_BIND_ENVVAR, ":9000")
    assert config.get_json_bind() == ":9000"


def test_grpc_bind_default_and_env(monkeypatch):
    assert config.get_grpc_bind() == "127.0.0.1:8081"
    monkeypatch.setenv(config.GRPC_BIND_ENVVAR, "[::]:50051")
    assert config.get_grpc_bind() == "[::]:50051"


@pytest.mark.parametrize(
    ("bind", "expected"),
    [
        ("127.0.0.1:8080", ("127.0.0.1", 8080)),
        (":8080", ("0.0.0.0", 8080)),
        ("localhost:1", ("localhost", 1)),
    ],
)
def test_parse_bind(bind, expected):
    assert config.parse_bind(bind) == expected


@pytest.mark.parametrize("bind", ["localhost", "localhost:", "host:http", ""])
def test_parse_bind_rejects_malformed(bind):
    with pytest.raises(config.InvalidConfigError):
        config.parse_bind(bind)
