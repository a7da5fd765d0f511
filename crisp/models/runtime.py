from pydantic import BaseModel, ConfigDict, Field


class _RuntimeSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore')


class ContainerMetadataSchema(_RuntimeSchema):
    name: str = ""
    attempt: int = 0


class ContainerSchema(_RuntimeSchema):
    id: str
    pod_sandbox_id: str = Field(default="", alias="podSandboxId")
    metadata: ContainerMetadataSchema = Field(default_factory=ContainerMetadataSchema)
    image_ref: str = Field(default="", alias="imageRef")
    state: str = "CONTAINER_UNKNOWN"
    created_at: int = Field(default=0, alias="createdAt")
    labels: dict[str, str] = Field(default_factory=dict)


class ListContainersResponseSchema(_RuntimeSchema):
    containers: list[ContainerSchema] = Field(default_factory=list)


class VersionResponseSchema(_RuntimeSchema):
    version: str = ""
    runtime_name: str = Field(default="", alias="runtimeName")
    runtime_version: str = Field(default="", alias="runtimeVersion")
    runtime_api_version: str = Field(default="", alias="runtimeApiVersion")
