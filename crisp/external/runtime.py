import requests
from crisp.common.logger import get_logger
from crisp.models.container import ContainerRecord
from crisp.models.runtime import ListContainersResponseSchema, VersionResponseSchema


logger = get_logger("runtime")

RUNTIME_SERVICE = "runtime.v1alpha2.RuntimeService"


class RuntimeServiceClient:
    def __init__(self, endpoint: str, timeout: float = 2.0, session: requests.Session | None = None):
        self.endpoint = endpoint.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb): # type: ignore
        self.close()

    def close(self):
        logger.debug('closing connection to {}'.format(self.endpoint))
        self.session.close()

    def _call(self, method: str, payload: dict):
        r = self.session.post(f"{self.endpoint}/{RUNTIME_SERVICE}/{method}", json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.content

    def list_containers(self) -> list[ContainerRecord]:
        response = ListContainersResponseSchema.model_validate_json(self._call("ListContainers", {"filter": None}))
        return [ContainerRecord(
            id=container.id,
            name=container.metadata.name,
            state=container.state,
            created_at=container.created_at,
        ) for container in response.containers]

    def version(self, client_version: str) -> VersionResponseSchema:
        return VersionResponseSchema.model_validate_json(self._call("Version", {"version": client_version}))
