"""AWS helper functions using Boto3."""

from typing import Any, Optional
import boto3
from botocore.exceptions import ClientError

from ..config import AWSConfig
from .logger import get_logger

logger = get_logger(__name__)

# head_bucket reports a missing bucket with a bare HTTP status code
BUCKET_NOT_FOUND_CODES = frozenset({"404", "NotFound", "NoSuchBucket"})


def get_boto3_client(service_name: str, region: Optional[str] = None) -> Any:
    """
    Get a Boto3 client for the specified AWS service.

    Args:
        service_name: AWS service name (e.g., 's3', 'glue', 'athena')
        region: AWS region. If None, uses AWS_REGION or us-east-1.

    Returns:
        Boto3 client instance.
    """
    region = region or AWSConfig().region
    logger.debug(f"Creating Boto3 client for {service_name} in {region}")
    return boto3.client(service_name, region_name=region)


def get_error_code(error: ClientError) -> str:
    """Return the service error code carried by a ClientError."""
    return error.response.get('Error', {}).get('Code', '')


def check_s3_bucket_exists(s3_client: Any, bucket: str) -> bool:
    """
    Check if an S3 bucket exists and is accessible.

    Args:
        s3_client: Boto3 S3 client
        bucket: S3 bucket name

    Returns:
        True if the bucket exists, False if S3 reports it as not found.

    Raises:
        ClientError: For any probe failure other than "not found".
    """
    try:
        s3_client.head_bucket(Bucket=bucket)
        logger.info(f"Bucket {bucket} exists and is accessible")
        return True
    except ClientError as e:
        if get_error_code(e) in BUCKET_NOT_FOUND_CODES:
            logger.info(f"Bucket {bucket} does not exist")
            return False
        logger.error(f"Error checking bucket {bucket}: {e}")
        raise
