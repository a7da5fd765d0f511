from __future__ import annotations

from pathlib import Path

import pytest

from crisp.models.container import ContainerRecord
from crisp.models.runtime import VersionResponseSchema


class FakeRuntimeClient:
    """Stand-in for RuntimeServiceClient that records every call."""

    def __init__(self, containers: list[ContainerRecord] | None = None, runtime_name: str = "containerd"):
        self.containers = containers or []
        self.runtime_name = runtime_name
        self.calls: list[str] = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.closed = True

    def list_containers(self) -> list[ContainerRecord]:
        self.calls.append("ListContainers")
        return list(self.containers)

    def version(self, client_version: str) -> VersionResponseSchema:
        self.calls.append(f"Version:{client_version}")
        return VersionResponseSchema(version=client_version, runtime_name=self.runtime_name,
                                     runtime_version="1.7.0", runtime_api_version="v1alpha2")


def make_container(name: str, container_id: str, created_at: int = 0) -> ContainerRecord:
    return ContainerRecord(id=container_id, name=name, state="CONTAINER_RUNNING", created_at=created_at)


@pytest.fixture
def write_mounts(tmp_path: Path):
    def _write(*lines: str) -> str:
        path = tmp_path / "mounts"
        path.write_text("\n".join(lines) + "\n")
        return str(path)

    return _write


@pytest.fixture
def fake_client() -> FakeRuntimeClient:
    return FakeRuntimeClient(containers=[
        make_container("web", "abc123", created_at=100),
        make_container("db", "def456", created_at=200),
    ])
