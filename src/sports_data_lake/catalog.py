"""
Glue Data Catalog provisioning for the sports data lake.

Creates the catalog database and a single external table that reads
every object under the bucket root as newline-delimited JSON.
"""

from typing import Any, Dict, List

from botocore.exceptions import ClientError

from .utils.aws_helpers import get_error_code
from .utils.logger import get_logger

logger = get_logger(__name__)

TABLE_COLUMNS: List[Dict[str, str]] = [
    {'Name': 'id', 'Type': 'string'},
    {'Name': 'name', 'Type': 'string'},
    {'Name': 'stats', 'Type': 'string'},
]

INPUT_FORMAT = 'org.apache.hadoop.mapred.TextInputFormat'
OUTPUT_FORMAT = 'org.apache.hadoop.hive.ql.io.HiveIgnoreKeyTextOutputFormat'
JSON_SERDE = 'org.openx.data.jsonserde.JsonSerDe'


class GlueCatalog:
    """Manages the Glue catalog database and table."""

    def __init__(self, glue_client: Any):
        self.glue_client = glue_client

    def ensure_database(self, database_name: str) -> bool:
        """
        Create the catalog database.

        Returns:
            bool: True if created, False if it already existed.

        Raises:
            ClientError: For any failure other than AlreadyExistsException.
        """
        try:
            logger.info(f"Creating Glue catalog database: {database_name}")
            self.glue_client.create_database(DatabaseInput={'Name': database_name})
            logger.info(f"Successfully created database: {database_name}")
            return True
        except ClientError as e:
            if get_error_code(e) == 'AlreadyExistsException':
                logger.warning(f"Database {database_name} already exists")
                return False
            raise

    def ensure_table(self, database_name: str, table_name: str, location: str) -> bool:
        """
        Register the table over ``location``.

        The schema is fixed: ``id``, ``name`` and ``stats``, all strings.

        Returns:
            bool: True if created, False if it already existed.

        Raises:
            ClientError: For any failure other than AlreadyExistsException.
        """
        table_input = {
            'Name': table_name,
            'TableType': 'EXTERNAL_TABLE',
            'Parameters': {'classification': 'json'},
            'StorageDescriptor': {
                'Columns': TABLE_COLUMNS,
                'Location': location,
                'InputFormat': INPUT_FORMAT,
                'OutputFormat': OUTPUT_FORMAT,
                'SerdeInfo': {'SerializationLibrary': JSON_SERDE},
            },
        }

        try:
            logger.info(f"Creating Glue table {database_name}.{table_name} at {location}")
            self.glue_client.create_table(DatabaseName=database_name, TableInput=table_input)
            logger.info(f"Successfully created table: {table_name}")
            return True
        except ClientError as e:
            if get_error_code(e) == 'AlreadyExistsException':
                logger.warning(f"Table {database_name}.{table_name} already exists")
                return False
            raise
