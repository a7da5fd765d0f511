class CrispError(Exception):
    pass


class UsageError(CrispError):
    pass


class NotFoundError(CrispError):
    def __init__(self, pattern: str):
        super().__init__(f"no container matches pattern '{pattern}'")
        self.pattern = pattern


class AmbiguousNameError(CrispError):
    def __init__(self, pattern: str, candidates: list[tuple[str, str]]):
        listing = ', '.join(f"{name} ({container_id})" for name, container_id in candidates)
        super().__init__(f"container name pattern '{pattern}' matches {len(candidates)} containers: {listing}")
        self.pattern = pattern
        self.candidates = candidates


class RootfsNotFoundError(CrispError):
    def __init__(self, container_id: str, container_name: str = ""):
        # container stopped, already exited, or using a storage driver without an overlay rootfs mount
        label = f"{container_name}({container_id})" if container_name else container_id
        super().__init__(f"could not find the rootfs for container {label}")
        self.container_id = container_id
        self.container_name = container_name


class UnsupportedRuntimeError(CrispError):
    def __init__(self, runtime_name: str, supported: str):
        super().__init__(f"copy not supported for runtime '{runtime_name}' (only '{supported}' is supported)")
        self.runtime_name = runtime_name
