class BenchError(Exception):
    """Base exception for roaring-bench."""

    error_code: str = "BENCH_ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(BenchError):
    """Invalid benchmark configuration value."""

    error_code = "CONFIG_INVALID"

    def __init__(self, name: str, raw: str) -> None:
        self.name = name
        self.raw = raw
        super().__init__(f"Invalid integer for {name}: {raw!r}")


class DatasetNotFoundError(BenchError):
    """Dataset archive does not exist."""

    error_code = "DATASET_NOT_FOUND"

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"I can't find the file: {path}")


class EmptyDatasetError(BenchError):
    """Dataset archive has no usable entries."""

    error_code = "DATASET_EMPTY"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Dataset appears empty: {name}")


class MalformedDataError(BenchError):
    """Dataset entry holds something other than comma-separated integers."""

    error_code = "DATASET_MALFORMED"

    def __init__(self, dataset: str, entry: str, token: str) -> None:
        self.dataset = dataset
        self.entry = entry
        self.token = token
        super().__init__(f"Malformed value {token!r} in entry {entry!r} of {dataset}")
