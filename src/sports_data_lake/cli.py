"""Command-line entry point for provisioning the sports data lake."""

import argparse
import sys
from typing import List, Optional

from .config import Config
from .exceptions import ConfigurationError, PipelineError
from .pipeline import DataLakePipeline
from .utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Provision the sports analytics data lake (S3, Glue, Athena)'
    )
    parser.add_argument(
        '--env-file',
        type=str,
        default=None,
        help='Path to a .env file (default: search for .env)'
    )
    parser.add_argument('--region', type=str, help='AWS region (overrides AWS_REGION)')
    parser.add_argument('--bucket', type=str, help='S3 bucket name (overrides S3_BUCKET_NAME)')
    parser.add_argument('--database', type=str, help='Glue database name (overrides GLUE_DATABASE_NAME)')
    parser.add_argument('--table', type=str, help='Glue table name (overrides GLUE_TABLE_NAME)')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit code."""
    args = parse_args(argv)

    try:
        config = Config.from_env(env_file=args.env_file)
    except ConfigurationError as e:
        logger.critical(str(e))
        return 1

    configure_logging(config.logging)

    config = config.with_overrides(
        region=args.region,
        bucket_name=args.bucket,
        database_name=args.database,
        table_name=args.table
    )

    try:
        pipeline = DataLakePipeline(config)
        result = pipeline.run()
    except PipelineError as e:
        logger.debug(f"Run aborted at stage: {e.stage}")
        return 1

    logger.info(
        f"Records uploaded: {result.records_uploaded}, "
        f"Athena query: {result.query_execution_id}"
    )
    return 0


if __name__ == '__main__':
    sys.exit(main())
