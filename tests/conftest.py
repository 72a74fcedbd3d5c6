"""Pytest configuration and fixtures."""

import pytest
from unittest.mock import Mock
from botocore.exceptions import ClientError

from sports_data_lake.config import (
    Config,
    AWSConfig,
    S3Config,
    GlueConfig,
    SportsDataConfig,
    LoggingConfig,
)
from sports_data_lake.utils.logger import configure_logging


def _client_error(code, operation='Operation', message='error'):
    return ClientError({'Error': {'Code': code, 'Message': message}}, operation)


class FakeS3Client:
    """In-memory stand-in for the handful of S3 calls the pipeline makes."""

    def __init__(self):
        self.buckets = set()
        self.objects = {}
        self.create_calls = 0

    def head_bucket(self, Bucket):
        if Bucket not in self.buckets:
            raise _client_error('404', 'HeadBucket', 'Not Found')
        return {}

    def create_bucket(self, Bucket, **kwargs):
        self.create_calls += 1
        self.buckets.add(Bucket)
        return {'Location': f'/{Bucket}'}

    def get_waiter(self, name):
        return Mock()

    def put_object(self, Bucket, Key, Body, **kwargs):
        self.objects[(Bucket, Key)] = Body
        return {'ETag': '"etag"'}


@pytest.fixture
def client_error():
    """Factory for botocore ClientError instances."""
    return _client_error


@pytest.fixture
def fake_s3():
    return FakeS3Client()


@pytest.fixture
def sample_records():
    """Records shaped like the sports data API player feed."""
    return [
        {'id': '1', 'name': 'A', 'stats': {'points': 30, 'rebounds': 10}},
        {'id': '2', 'name': 'B', 'stats': {'points': 12, 'rebounds': 4}},
        {'id': '3', 'name': 'C', 'stats': {'points': 21, 'rebounds': 7}},
    ]


@pytest.fixture
def config():
    """Fully populated configuration independent of the host environment."""
    return Config(
        aws=AWSConfig(region='us-east-1'),
        s3=S3Config(
            bucket_name='test-sports-lake',
            object_key='nba_data.json',
            results_prefix='athena-results/',
            ready_delay=1,
            ready_max_attempts=2,
        ),
        glue=GlueConfig(database_name='test_nba_db', table_name='nba_data'),
        sports_data=SportsDataConfig(api_key='secret-key', endpoint='https://api.example.com/nba/players'),
    )


@pytest.fixture
def http_response():
    """Factory for requests-style response mocks."""
    def _make(status_code=200, json_data=None, text='', json_error=None):
        response = Mock()
        response.status_code = status_code
        response.text = text
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = json_data
        return response
    return _make


@pytest.fixture
def mock_aws_credentials(monkeypatch):
    """Mock AWS credentials for testing."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SECURITY_TOKEN', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', 'us-east-1')


@pytest.fixture
def empty_env_file(tmp_path):
    """Empty dotenv file so tests never pick up a developer's .env."""
    path = tmp_path / '.env'
    path.write_text('')
    return str(path)


@pytest.fixture
def sports_env(monkeypatch):
    """Set the required sports API variables and clear optional overrides."""
    monkeypatch.setenv('SPORTS_DATA_API_KEY', 'env-key')
    monkeypatch.setenv('NBA_ENDPOINT', 'https://api.example.com/nba')
    for name in (
        'AWS_REGION', 'S3_BUCKET_NAME', 'S3_OBJECT_KEY', 'ATHENA_RESULTS_PREFIX',
        'S3_READY_DELAY', 'S3_READY_MAX_ATTEMPTS', 'GLUE_DATABASE_NAME', 'GLUE_TABLE_NAME',
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_package_logging():
    """Put package loggers back to dev/INFO after a test reconfigures them."""
    yield
    configure_logging(LoggingConfig(environment='dev', log_level='INFO'))


@pytest.fixture
def dotenv_vars(monkeypatch):
    """Register variables so monkeypatch removes whatever load_dotenv writes."""
    def _register(*names):
        for name in names:
            monkeypatch.setenv(name, 'unset')
            monkeypatch.delenv(name)
    return _register
