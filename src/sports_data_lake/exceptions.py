"""Exception types raised while provisioning the sports data lake."""

from typing import Optional


class DataLakeError(Exception):
    """Base class for all data lake provisioning errors."""


class ConfigurationError(DataLakeError):
    """A required configuration value is missing or malformed."""

    def __init__(self, variable: str, message: Optional[str] = None):
        self.variable = variable
        super().__init__(message or f"{variable} is not set")


class FetchError(DataLakeError):
    """The sports data API could not be read."""


class ApiStatusError(FetchError):
    """The sports data API answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API returned {status_code}: {body}")


class UnexpectedStructureError(FetchError):
    """The API payload is neither a JSON array of objects nor a JSON object."""

    def __init__(self, message: str = "unexpected JSON structure"):
        super().__init__(message)


class StorageNotReadyError(DataLakeError):
    """The bucket did not become visible within the readiness window."""


class PipelineError(DataLakeError):
    """A pipeline stage failed; the run was aborted."""

    def __init__(self, stage: str, cause: Optional[BaseException] = None):
        self.stage = stage
        self.cause = cause
        message = f"Failed to {stage}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
