"""End-to-end tests for `mailinglist serve` (no server is actually started)."""

import pytest

from mailinglist.entrypoints.cli import serve as serve_module
from mailinglist.entrypoints.grpc import GrpcBindError


class _StoppedServer:
    def __init__(self, calls: list[dict]):
        self.calls = calls

    def stop(self, grace):
        self.calls.append({"stopped": grace})
        return self

    def wait(self):
        return True


@pytest.fixture
def fake_uvicorn_run(monkeypatch):
    """Capture uvicorn.run() calls instead of starting a server."""
    calls: list[dict] = []

    def _run(app, **kwargs):
        calls.append({"app": app, **kwargs})

    monkeypatch.setattr(serve_module.uvicorn, "run", _run)
    return calls


@pytest.fixture
def fake_grpc(monkeypatch):
    """Capture gRPC server starts and stops instead of binding a port."""
    calls: list[dict] = []

    def _start(service, bind):
        calls.append({"service": service, "bind": bind})
        return _StoppedServer(calls), 8081

    monkeypatch.setattr(serve_module, "start_server", _start)
    return calls


def test_serve_uses_default_binds(invoke, fake_uvicorn_run, fake_grpc):
    result = invoke("serve")

    assert result.exit_code == 0, result.output
    [call] = fake_uvicorn_run
    assert (call["host"], call["port"]) == ("127.0.0.1", 8080)
    assert call["log_config"] is None
    assert call["app"].title == "MAILINGLIST JSON API"
    assert fake_grpc[0]["bind"] == "127.0.0.1:8081"


def test_both_apis_share_one_service(invoke, fake_uvicorn_run, fake_grpc):
    assert invoke("serve").exit_code == 0

    [call] = fake_uvicorn_run
    assert fake_grpc[0]["service"] is call["app"].state.service


def test_grpc_server_is_stopped_when_http_exits(invoke, fake_uvicorn_run, fake_grpc):
    assert invoke("serve").exit_code == 0

    assert fake_grpc[-1] == {"stopped": serve_module.GRPC_STOP_GRACE}


def test_serve_bind_options_and_env(invoke, fake_uvicorn_run, fake_grpc):
    assert invoke("serve", "--bind", ":9090", "--grpc-bind", ":9091").exit_code == 0
    assert (
        invoke(
            "serve",
            env={
                "MAILINGLIST_JSON_BIND": "localhost:7070",
                "MAILINGLIST_GRPC_BIND": "localhost:7071",
            },
        ).exit_code
        == 0
    )

    assert [(c["host"], c["port"]) for c in fake_uvicorn_run] == [
        ("0.0.0.0", 9090),
        ("localhost", 7070),
    ]
    assert [c["bind"] for c in fake_grpc if "bind" in c] == [":9091", "localhost:7071"]


def test_no_grpc_serves_http_only(invoke, fake_uvicorn_run, fake_grpc):
    result = invoke("serve", "--no-grpc", "--grpc-bind", "nonsense")

    assert result.exit_code == 0, result.output
    assert len(fake_uvicorn_run) == 1
    assert not fake_grpc


def test_serve_creates_table_before_binding(invoke, fake_uvicorn_run, fake_grpc):
    assert invoke("serve").exit_code == 0

    status = invoke("db", "status")

    assert "emails (present)" in status.output


@pytest.mark.parametrize(
    ("args", "option"),
    [(["--bind", "localhost"], "--bind"), (["--grpc-bind", "localhost"], "--grpc-bind")],
)
def test_serve_rejects_bad_bind(invoke, fake_uvicorn_run, fake_grpc, args, option):
    result = invoke("serve", *args)

    assert result.exit_code != 0
    assert "HOST:PORT" in result.output
    assert option in result.output
    assert not fake_uvicorn_run
    assert not fake_grpc


def test_grpc_bind_failure_aborts_before_http(invoke, fake_uvicorn_run, monkeypatch):
    def _start(service, bind):
        raise GrpcBindError(f"cannot listen on {bind}")

    monkeypatch.setattr(serve_module, "start_server", _start)

    result = invoke("serve", "--grpc-bind", "127.0.0.1:1")

    assert result.exit_code != 0
    assert "cannot listen on 127.0.0.1:1" in result.output
    assert not fake_uvicorn_run
