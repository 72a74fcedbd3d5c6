"""
Sequential provisioning run for the sports data lake.

Steps, in order:
1. Ensure the S3 bucket exists
2. Wait for the bucket to become visible
3. Ensure the Glue catalog database exists
4. Fetch records from the sports data API
5. Upload records to S3 as NDJSON (skipped when there are none)
6. Register the Glue table over the bucket
7. Submit the database declaration to Athena

Any failing step aborts the run; resources created earlier are kept.
"""

from typing import Any, Callable, Optional

from botocore.exceptions import BotoCoreError
from pydantic import BaseModel

from .catalog import GlueCatalog
from .config import Config
from .exceptions import PipelineError
from .fetcher import fetch_records
from .query_engine import AthenaConfigurator
from .storage import BucketProvisioner, DataUploader
from .utils.aws_helpers import get_boto3_client
from .utils.logger import get_logger

logger = get_logger(__name__)


class PipelineResult(BaseModel):
    """Outcome of a successful run."""

    bucket_created: bool
    database_created: bool
    records_uploaded: int
    table_created: bool
    query_execution_id: str


class DataLakePipeline:
    """Runs the provisioning steps against S3, Glue, Athena and the sports API."""

    def __init__(
        self,
        config: Config,
        s3_client: Optional[Any] = None,
        glue_client: Optional[Any] = None,
        athena_client: Optional[Any] = None,
        session: Optional[Any] = None
    ):
        """
        Initialize the pipeline.

        Args:
            config: Validated configuration.
            s3_client: S3 client. If None, creates one in config.aws.region.
            glue_client: Glue client. If None, creates one.
            athena_client: Athena client. If None, creates one.
            session: HTTP session for the API call. If None, uses requests.

        Raises:
            PipelineError: If a default AWS client cannot be created.
        """
        self.config = config
        region = config.aws.region
        try:
            self.s3_client = s3_client or get_boto3_client('s3', region=region)
            self.glue_client = glue_client or get_boto3_client('glue', region=region)
            self.athena_client = athena_client or get_boto3_client('athena', region=region)
        except BotoCoreError as e:
            logger.error(f"Failed to create AWS clients: {e}")
            raise PipelineError("create AWS clients", e) from e
        self.session = session

        self.buckets = BucketProvisioner(
            self.s3_client,
            region=region,
            ready_delay=config.s3.ready_delay,
            ready_max_attempts=config.s3.ready_max_attempts
        )
        self.uploader = DataUploader(self.s3_client, object_key=config.s3.object_key)
        self.catalog = GlueCatalog(self.glue_client)
        self.athena = AthenaConfigurator(self.athena_client)

    def _run_step(self, stage: str, func: Callable[..., Any], *args: Any) -> Any:
        logger.info(f"[STEP] {stage}")
        try:
            return func(*args)
        except Exception as e:
            logger.error(f"Failed to {stage}: {e}")
            raise PipelineError(stage, e) from e

    def run(self) -> PipelineResult:
        """
        Execute every step in order.

        Returns:
            PipelineResult describing what was created.

        Raises:
            PipelineError: If any step fails. The original error is chained.
        """
        s3 = self.config.s3
        glue = self.config.glue
        sports_data = self.config.sports_data

        bucket_created = self._run_step("create S3 bucket", self.buckets.ensure_bucket, s3.bucket_name)
        self._run_step("wait for S3 bucket", self.buckets.wait_until_ready, s3.bucket_name)
        database_created = self._run_step("create Glue database", self.catalog.ensure_database, glue.database_name)
        batch = self._run_step(
            "fetch NBA data", fetch_records, sports_data.endpoint, sports_data.api_key, self.session
        )
        records_uploaded = self._run_step("upload data to S3", self.uploader.upload, s3.bucket_name, batch)
        table_created = self._run_step(
            "create Glue table", self.catalog.ensure_table, glue.database_name, glue.table_name, s3.bucket_location
        )
        query_execution_id = self._run_step(
            "configure Athena", self.athena.configure, glue.database_name, s3.results_location
        )

        logger.info("Data lake setup complete.")
        return PipelineResult(
            bucket_created=bucket_created,
            database_created=database_created,
            records_uploaded=records_uploaded,
            table_created=table_created,
            query_execution_id=query_execution_id
        )
