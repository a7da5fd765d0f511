from crisp.common.errors import RootfsNotFoundError
from crisp.common.expression import decode_mount_field
from crisp.common.logger import get_logger
from crisp.models.container import MountEntry


logger = get_logger("mounts")

ROOTFS_MARKER = "rootfs"


def parse_mount_line(line: str):
    "source target type options dump pass -> MountEntry"

    parts = line.split()
    if len(parts) < 4:
        return None

    return MountEntry(
        source=decode_mount_field(parts[0]),
        target=decode_mount_field(parts[1]),
        fstype=parts[2],
        options=parts[3].split(','),
        dump=int(parts[4]) if len(parts) > 4 and parts[4].isdigit() else 0,
        passno=int(parts[5]) if len(parts) > 5 and parts[5].isdigit() else 0,
    )


def read_mount_table(mounts_path: str = "/proc/mounts"):
    with open(mounts_path, "r") as f:
        lines = f.read().splitlines()

    entries: list[MountEntry] = []
    for line in lines:
        if not line.strip():
            continue
        entry = parse_mount_line(line)
        if entry is None:
            logger.debug('skipping malformed mount line: {!r}'.format(line))
            continue
        entries.append(entry)

    return entries


def is_container_rootfs(entry: MountEntry, container_id: str) -> bool:
    # containerd shims mount the overlay at .../<id>/rootfs, the id may live in either field
    if not container_id:
        return False
    if container_id not in entry.source and container_id not in entry.target:
        return False

    return ROOTFS_MARKER in entry.target or ROOTFS_MARKER in entry.source or any(ROOTFS_MARKER in o for o in entry.options)


class MountTableReader:
    def __init__(self, mounts_path: str = "/proc/mounts", predicate=is_container_rootfs):
        self.mounts_path = mounts_path
        self.predicate = predicate

    def find_root_mount(self, container_id: str, container_name: str = "") -> str:
        # never cached, containers come and go between calls
        for entry in read_mount_table(self.mounts_path):
            if self.predicate(entry, container_id):
                logger.debug('rootfs of {} mounted at {}'.format(container_id, entry.target))
                return entry.target

        raise RootfsNotFoundError(container_id, container_name)
