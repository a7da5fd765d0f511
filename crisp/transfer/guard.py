from crisp.common.errors import UnsupportedRuntimeError
from crisp.common.logger import get_logger


logger = get_logger("guard")


class RuntimeCapabilityGuard:
    """Allow-list check on the connected runtime.

    Rootfs discovery reads containerd's mount layout from the host mount
    table. On any other runtime the lookup could land on the wrong
    directory, so the copy is refused outright.
    """

    def __init__(self, client_version: str, supported_runtime: str):
        self.client_version = client_version
        self.supported_runtime = supported_runtime

    def check(self, client):
        version = client.version(self.client_version)
        logger.debug('connected runtime: {} {} (api {})'.format(
            version.runtime_name, version.runtime_version, version.runtime_api_version))

        if version.runtime_name != self.supported_runtime:
            raise UnsupportedRuntimeError(version.runtime_name, self.supported_runtime)
