"""
Sports analytics data lake provisioning.

Creates an S3 bucket, loads sports statistics from a REST API into it as
newline-delimited JSON, and registers the data with Glue and Athena.
"""

from .config import Config
from .exceptions import (
    DataLakeError,
    ConfigurationError,
    FetchError,
    ApiStatusError,
    UnexpectedStructureError,
    StorageNotReadyError,
    PipelineError,
)
from .models import Record, RecordBatch
from .pipeline import DataLakePipeline, PipelineResult

__version__ = "0.1.0"

__all__ = [
    "Config",
    "DataLakeError",
    "ConfigurationError",
    "FetchError",
    "ApiStatusError",
    "UnexpectedStructureError",
    "StorageNotReadyError",
    "PipelineError",
    "Record",
    "RecordBatch",
    "DataLakePipeline",
    "PipelineResult",
]
