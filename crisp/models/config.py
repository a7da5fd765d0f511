import os
from typing import Any
from pydantic import BaseModel, Field
from crisp.common.utils import env_flag


DEFAULT_RUNTIME_ENDPOINT = "http://127.0.0.1:10010"
DEFAULT_CLIENT_VERSION = "v1alpha2"
# the rootfs mount lookup only knows the containerd shim layout
SUPPORTED_RUNTIME = "containerd"


class CrispConfig(BaseModel):
    runtime_endpoint: str = DEFAULT_RUNTIME_ENDPOINT
    timeout: float = Field(default=2.0, gt=0)
    debug: bool = False
    mounts_path: str = "/proc/mounts"
    client_version: str = DEFAULT_CLIENT_VERSION
    supported_runtime: str = SUPPORTED_RUNTIME

    @classmethod
    def from_env(cls, **overrides: Any):
        values: dict[str, Any] = {}
        if os.environ.get("CONTAINER_RUNTIME_ENDPOINT"):
            values["runtime_endpoint"] = os.environ["CONTAINER_RUNTIME_ENDPOINT"]
        if os.environ.get("CRISP_TIMEOUT"):
            values["timeout"] = os.environ["CRISP_TIMEOUT"]
        if "CRISP_DEBUG" in os.environ:
            values["debug"] = env_flag(os.environ["CRISP_DEBUG"])
        if os.environ.get("CRISP_MOUNTS_PATH"):
            values["mounts_path"] = os.environ["CRISP_MOUNTS_PATH"]

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
