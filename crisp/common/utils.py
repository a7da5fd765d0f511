import os
import subprocess
from crisp.common.logger import get_logger


logger = get_logger("utils")


def sudo_wrap(args: list[str]):
    if os.geteuid() != 0:
        logger.debug('sudo: {}'.format(args))
        return ["sudo"] + args
    return args


def sudo_call(args: list[str]):
    return subprocess.check_call(sudo_wrap(args))


def env_flag(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def join_host_path(root: str, fragment: str):
    "/rootfs/ + /etc/hosts -> /rootfs/etc/hosts"

    if not fragment:
        return root
    return root.rstrip('/') + '/' + fragment.lstrip('/')
