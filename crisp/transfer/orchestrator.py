from typing import Callable, Sequence
from crisp.common.errors import UsageError
from crisp.common.logger import get_logger
from crisp.system.mounts import MountTableReader
from crisp.transfer.guard import RuntimeCapabilityGuard
from crisp.transfer.resolver import ContainerResolver, PathEndpointResolver, RootfsLocator


logger = get_logger("orchestrator")


class CopyOrchestrator:
    def __init__(self, connect: Callable, guard: RuntimeCapabilityGuard,
                 mounts: MountTableReader, copy_file: Callable[[str, str], object],
                 prog: str = "crisp cp"):
        self.connect = connect
        self.guard = guard
        self.mounts = mounts
        self.copy_file = copy_file
        self.prog = prog

    def execute(self, args: Sequence[str]):
        if len(args) != 2:
            raise UsageError(f"usage: {self.prog} <src> <dst>")
        src, dst = args

        with self.connect() as client:
            self.guard.check(client)

            resolver = PathEndpointResolver(RootfsLocator(ContainerResolver(client), self.mounts))
            src_resolved = resolver.resolve(src)
            dst_resolved = resolver.resolve(dst)

            logger.debug('Copying {} to {}'.format(src_resolved, dst_resolved))
            return self.copy_file(src_resolved, dst_resolved)
