"""S3 bucket provisioning and newline-delimited JSON upload."""

import json
from typing import Any

from botocore.exceptions import WaiterError

from .exceptions import StorageNotReadyError
from .models import RecordBatch
from .utils.aws_helpers import check_s3_bucket_exists
from .utils.logger import get_logger

logger = get_logger(__name__)

NDJSON_CONTENT_TYPE = "application/x-ndjson"


def to_ndjson(batch: RecordBatch) -> str:
    """
    Serialize a batch as newline-delimited JSON.

    Each record becomes one compact JSON object on its own line, in batch
    order, and every line (including the last) ends with a newline.

    Raises:
        ValueError: If a record holds NaN or Infinity, which strict JSON
            readers reject.
    """
    return "".join(
        json.dumps(record, separators=(",", ":"), allow_nan=False) + "\n" for record in batch
    )


class BucketProvisioner:
    """Ensures the data lake bucket exists and is visible."""

    def __init__(
        self,
        s3_client: Any,
        region: str = 'us-east-1',
        ready_delay: int = 5,
        ready_max_attempts: int = 12
    ):
        """
        Initialize Bucket Provisioner.

        Args:
            s3_client: Boto3 S3 client.
            region: AWS region for bucket creation.
            ready_delay: Seconds between readiness probes.
            ready_max_attempts: Probes before giving up.
        """
        self.s3_client = s3_client
        self.region = region
        self.ready_delay = ready_delay
        self.ready_max_attempts = ready_max_attempts

    def ensure_bucket(self, bucket_name: str) -> bool:
        """
        Create the bucket unless it already exists.

        Returns:
            bool: True if the bucket was created, False if it already existed.

        Raises:
            ClientError: If the existence probe fails for a reason other than
                "not found", or if creation fails.
        """
        if check_s3_bucket_exists(self.s3_client, bucket_name):
            logger.info(f"Bucket {bucket_name} already exists")
            return False

        logger.info(f"Creating S3 bucket: {bucket_name}")
        # us-east-1 rejects an explicit LocationConstraint
        if self.region == 'us-east-1':
            self.s3_client.create_bucket(Bucket=bucket_name)
        else:
            self.s3_client.create_bucket(
                Bucket=bucket_name,
                CreateBucketConfiguration={'LocationConstraint': self.region}
            )

        logger.info(f"Bucket {bucket_name} created successfully")
        return True

    def wait_until_ready(self, bucket_name: str) -> None:
        """
        Block until S3 reports the bucket as existing.

        Raises:
            StorageNotReadyError: If the bucket is not visible after
                ready_max_attempts probes.
        """
        logger.info(
            f"Waiting for bucket {bucket_name} "
            f"(every {self.ready_delay}s, up to {self.ready_max_attempts} attempts)"
        )
        waiter = self.s3_client.get_waiter('bucket_exists')
        try:
            waiter.wait(
                Bucket=bucket_name,
                WaiterConfig={
                    'Delay': self.ready_delay,
                    'MaxAttempts': self.ready_max_attempts
                }
            )
        except WaiterError as e:
            raise StorageNotReadyError(f"Bucket {bucket_name} not ready: {e}") from e
        logger.info(f"Bucket {bucket_name} is ready")


class DataUploader:
    """Writes a record batch to S3 as a single NDJSON object."""

    def __init__(self, s3_client: Any, object_key: str = "nba_data.json"):
        self.s3_client = s3_client
        self.object_key = object_key

    def upload(self, bucket_name: str, batch: RecordBatch) -> int:
        """
        Upload the batch as one object.

        An empty batch is skipped without calling S3.

        Returns:
            int: Number of records written (0 when skipped).
        """
        if batch.is_empty:
            logger.info("No records to upload, skipping")
            return 0

        body = to_ndjson(batch).encode("utf-8")
        logger.info(f"Uploading {len(batch)} records ({len(body)} bytes) to s3://{bucket_name}/{self.object_key}")
        self.s3_client.put_object(
            Bucket=bucket_name,
            Key=self.object_key,
            Body=body,
            ContentLength=len(body),
            ContentType=NDJSON_CONTENT_TYPE
        )
        logger.info(f"Successfully uploaded to s3://{bucket_name}/{self.object_key}")
        return len(batch)
