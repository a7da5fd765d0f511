import re
from crisp.common.errors import AmbiguousNameError, NotFoundError, UsageError
from crisp.common.expression import parse_endpoint_expression
from crisp.common.logger import get_logger
from crisp.common.utils import join_host_path
from crisp.models.container import ContainerRecord
from crisp.system.mounts import MountTableReader


logger = get_logger("resolver")


def filter_containers_by_name(containers: list[ContainerRecord], name_pattern: str):
    try:
        name_regexp = re.compile(name_pattern)
    except re.error as e:
        raise UsageError(f"invalid container name pattern '{name_pattern}': {e}") from e

    matched = [c for c in containers if name_regexp.search(c.name)]
    return sorted(matched, key=lambda c: c.created_at, reverse=True)


class ContainerResolver:
    def __init__(self, client):
        self.client = client
        self._containers: list[ContainerRecord] | None = None

    def list_containers(self):
        # one listing per resolver, a resolver lives for a single copy
        if self._containers is None:
            self._containers = self.client.list_containers()
        return self._containers

    def resolve(self, name_pattern: str) -> str:
        # the service returns everything, filtering happens here
        containers = self.list_containers()
        matched = filter_containers_by_name(containers, name_pattern)
        logger.debug('containers matching {!r}: {}'.format(name_pattern, matched))

        if not matched:
            raise NotFoundError(name_pattern)

        if len(matched) > 1:
            logger.info('containers {}'.format(matched))
            raise AmbiguousNameError(name_pattern, [(c.name, c.id) for c in matched])

        return matched[0].id


class RootfsLocator:
    def __init__(self, containers: ContainerResolver, mounts: MountTableReader):
        self.containers = containers
        self.mounts = mounts

    def locate(self, name_pattern: str) -> str:
        return self.mounts.find_root_mount(self.containers.resolve(name_pattern), name_pattern)


class PathEndpointResolver:
    def __init__(self, locator: RootfsLocator):
        self.locator = locator

    def resolve(self, endpoint_spec: str) -> str:
        logger.debug('Resolving path {}'.format(endpoint_spec))
        endpoint = parse_endpoint_expression(endpoint_spec)
        if not endpoint.is_container:
            return endpoint.path

        assert endpoint.container is not None
        root = self.locator.locate(endpoint.container)
        return join_host_path(root, endpoint.path)
