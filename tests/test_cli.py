from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, patch

import pytest
import requests
from click.testing import CliRunner

from conftest import FakeRuntimeClient, make_container
from crisp.cli import cli


@pytest.fixture
def runner(monkeypatch, write_mounts) -> CliRunner:
    monkeypatch.delenv("CONTAINER_RUNTIME_ENDPOINT", raising=False)
    monkeypatch.delenv("CRISP_DEBUG", raising=False)
    monkeypatch.setenv("CRISP_MOUNTS_PATH", write_mounts(
        "proc /proc proc rw 0 0",
        "overlay /var/lib/rt/abc123/rootfs overlay rw,relatime 0 0",
    ))
    return CliRunner()


def _client(runtime_name: str = "containerd") -> FakeRuntimeClient:
    return FakeRuntimeClient(containers=[make_container("web", "abc123")], runtime_name=runtime_name)


def test_copy_success_is_silent(runner):
    client = _client()
    with patch("crisp.cli.RuntimeServiceClient", return_value=client) as client_cls, \
         patch("crisp.cli.copy_file") as copy_file:
        result = runner.invoke(cli, ["-r", "http://node:9000", "-t", "5", "cp", "web:/etc/hosts", "/tmp/hosts.bak"])

    assert result.exit_code == 0, result.output
    assert result.output == ""
    copy_file.assert_called_once_with("/var/lib/rt/abc123/rootfs/etc/hosts", "/tmp/hosts.bak")
    client_cls.assert_called_once_with("http://node:9000", timeout=5.0)
    assert client.closed


def test_usage_error(runner):
    with patch("crisp.cli.RuntimeServiceClient") as client_cls:
        result = runner.invoke(cli, ["cp", "only-one"])

    assert result.exit_code == 1
    assert "usage: crisp cp <src> <dst>" in result.output
    client_cls.assert_not_called()


def test_unsupported_runtime(runner):
    with patch("crisp.cli.RuntimeServiceClient", return_value=_client("cri-o")), \
         patch("crisp.cli.copy_file") as copy_file:
        result = runner.invoke(cli, ["cp", "web:/etc/hosts", "/tmp/x"])

    assert result.exit_code == 1
    assert "copy not supported for runtime 'cri-o'" in result.output
    copy_file.assert_not_called()


def test_container_not_found(runner):
    with patch("crisp.cli.RuntimeServiceClient", return_value=_client()), patch("crisp.cli.copy_file"):
        result = runner.invoke(cli, ["cp", "cache:/etc/hosts", "/tmp/x"])

    assert result.exit_code == 1
    assert "no container matches pattern 'cache'" in result.output


def test_copy_exit_status_passed_through(runner):
    failure = subprocess.CalledProcessError(3, ["cp", "a", "b"])
    with patch("crisp.cli.RuntimeServiceClient", return_value=_client()), \
         patch("crisp.cli.copy_file", MagicMock(side_effect=failure)):
        result = runner.invoke(cli, ["cp", "/tmp/a", "/tmp/b"])

    assert result.exit_code == 3
    assert "copy failed" in result.output


def test_connection_error(runner):
    client = _client()
    client.version = MagicMock(side_effect=requests.ConnectionError("connection refused"))
    with patch("crisp.cli.RuntimeServiceClient", return_value=client):
        result = runner.invoke(cli, ["cp", "/tmp/a", "/tmp/b"])

    assert result.exit_code == 1
    assert "connection refused" in result.output
    assert client.closed


def test_invalid_timeout_is_usage_error(runner):
    result = runner.invoke(cli, ["-t", "0", "cp", "/tmp/a", "/tmp/b"])
    assert result.exit_code == 2


def test_copy_as_regular_user_is_silent(runner):
    with patch("crisp.cli.RuntimeServiceClient", return_value=_client()), \
         patch("crisp.common.utils.os.geteuid", return_value=1000), \
         patch("crisp.common.utils.subprocess.check_call") as check_call:
        result = runner.invoke(cli, ["cp", "web:/etc/hosts", "/tmp/hosts.bak"])

    assert result.exit_code == 0, result.output
    assert result.output == ""
    check_call.assert_called_once_with(["sudo", "cp", "/var/lib/rt/abc123/rootfs/etc/hosts", "/tmp/hosts.bak"])
