from crisp.common.utils import sudo_call
from crisp.common.logger import get_logger


logger = get_logger("copy")


def copy_file(src: str, dst: str):
    # rootfs mounts are only readable by root, sudo_call handles the escalation
    args = ["cp", src, dst]
    logger.debug('copy command: {}'.format(args))
    sudo_call(args)
