"""Athena setup for the sports data lake."""

from typing import Any

from .utils.logger import get_logger

logger = get_logger(__name__)


class AthenaConfigurator:
    """Submits the database declaration to Athena."""

    def __init__(self, athena_client: Any):
        self.athena_client = athena_client

    def configure(self, database_name: str, output_location: str) -> str:
        """
        Start ``CREATE DATABASE IF NOT EXISTS`` for the catalog database.

        The query is not polled; only the submission is acknowledged.

        Returns:
            str: Athena query execution ID.
        """
        response = self.athena_client.start_query_execution(
            QueryString=f"CREATE DATABASE IF NOT EXISTS {database_name}",
            QueryExecutionContext={'Database': database_name},
            ResultConfiguration={'OutputLocation': output_location}
        )
        query_execution_id = response['QueryExecutionId']
        logger.info(f"Athena query submitted: {query_execution_id} (results: {output_location})")
        return query_execution_id
