from dataclasses import dataclass


@dataclass
class ContainerRecord:
    id: str
    name: str
    state: str
    created_at: int = 0


@dataclass
class MountEntry:
    source: str
    target: str
    fstype: str
    options: list[str]
    dump: int = 0
    passno: int = 0


@dataclass
class Endpoint:
    container: str | None
    path: str

    @property
    def is_container(self) -> bool:
        return self.container is not None
