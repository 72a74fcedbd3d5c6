"""Utility modules for the sports data lake."""

from .logger import get_logger, configure_logging
from .aws_helpers import (
    get_boto3_client,
    get_error_code,
    check_s3_bucket_exists,
)

__all__ = [
    "get_logger",
    "configure_logging",
    "get_boto3_client",
    "get_error_code",
    "check_s3_bucket_exists",
]
