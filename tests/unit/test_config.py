"""Unit tests for configuration module."""

import pytest
from pydantic import ValidationError

from sports_data_lake.config import Config, AWSConfig, S3Config, GlueConfig
from sports_data_lake.exceptions import ConfigurationError


class TestAWSConfig:
    """Test AWS configuration."""

    def test_default_region(self, monkeypatch):
        """Test default AWS region."""
        monkeypatch.delenv('AWS_REGION', raising=False)
        config = AWSConfig()
        assert config.region == "us-east-1"

    def test_region_from_env(self, monkeypatch):
        monkeypatch.setenv('AWS_REGION', 'eu-west-1')
        assert AWSConfig().region == 'eu-west-1'


class TestS3Config:
    """Test S3 configuration."""

    def test_defaults(self, sports_env):
        config = S3Config()
        assert config.bucket_name == 'sports-analytics-data-lake3'
        assert config.object_key == 'nba_data.json'
        assert config.ready_delay == 5
        assert config.ready_max_attempts == 12

    def test_locations(self):
        config = S3Config(bucket_name='my-bucket', results_prefix='athena-results/')
        assert config.bucket_location == 's3://my-bucket/'
        assert config.results_location == 's3://my-bucket/athena-results/'

    def test_numeric_env_values(self, monkeypatch):
        monkeypatch.setenv('S3_READY_DELAY', '2')
        monkeypatch.setenv('S3_READY_MAX_ATTEMPTS', '30')
        config = S3Config()
        assert config.ready_delay == 2
        assert config.ready_max_attempts == 30


class TestGlueConfig:
    """Test Glue configuration."""

    def test_defaults(self, sports_env):
        config = GlueConfig()
        assert config.database_name == 'glue_nba_data_lake'
        assert config.table_name == 'nba_data'


class TestConfigFromEnv:
    """Test loading the main configuration object."""

    def test_loads_required_values(self, sports_env, empty_env_file):
        config = Config.from_env(env_file=empty_env_file)
        assert config.project_name == "sports-data-lake"
        assert config.sports_data.api_key == 'env-key'
        assert config.sports_data.endpoint == 'https://api.example.com/nba'
        assert isinstance(config.aws, AWSConfig)

    def test_missing_api_key(self, sports_env, empty_env_file, monkeypatch):
        monkeypatch.delenv('SPORTS_DATA_API_KEY')
        with pytest.raises(ConfigurationError, match='SPORTS_DATA_API_KEY'):
            Config.from_env(env_file=empty_env_file)

    def test_empty_endpoint(self, sports_env, empty_env_file, monkeypatch):
        monkeypatch.setenv('NBA_ENDPOINT', '')
        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_env(env_file=empty_env_file)
        assert exc_info.value.variable == 'NBA_ENDPOINT'

    def test_reads_dotenv_file(self, dotenv_vars, tmp_path):
        dotenv_vars('SPORTS_DATA_API_KEY', 'NBA_ENDPOINT')
        env_file = tmp_path / '.env'
        env_file.write_text('SPORTS_DATA_API_KEY=file-key\nNBA_ENDPOINT=https://file.example.com\n')

        config = Config.from_env(env_file=str(env_file))

        assert config.sports_data.api_key == 'file-key'
        assert config.sports_data.endpoint == 'https://file.example.com'

    def test_api_key_not_in_repr(self, config):
        assert 'secret-key' not in repr(config)

    def test_config_is_frozen(self, config):
        with pytest.raises(ValidationError):
            config.project_name = 'other'


class TestOverrides:
    """Test command-line style overrides."""

    def test_overrides_replace_values(self, config):
        updated = config.with_overrides(
            region='us-west-2', bucket_name='other-bucket', database_name='other_db', table_name='players'
        )
        assert updated.aws.region == 'us-west-2'
        assert updated.s3.bucket_name == 'other-bucket'
        assert updated.s3.object_key == config.s3.object_key
        assert updated.glue.database_name == 'other_db'
        assert updated.glue.table_name == 'players'
        assert config.s3.bucket_name == 'test-sports-lake'

    def test_no_overrides_keeps_values(self, config):
        assert config.with_overrides() == config


class TestConfigErrors:
    """Test malformed or unreadable configuration."""

    def test_missing_env_file(self, sports_env, tmp_path):
        missing = tmp_path / 'nowhere' / '.env'

        with pytest.raises(ConfigurationError, match='Error loading .env file') as exc_info:
            Config.from_env(env_file=str(missing))
        assert exc_info.value.variable == 'env_file'

    @pytest.mark.parametrize('name', ['S3_READY_DELAY', 'S3_READY_MAX_ATTEMPTS'])
    def test_non_integer_setting(self, sports_env, empty_env_file, monkeypatch, name):
        monkeypatch.setenv(name, 'five')

        with pytest.raises(ConfigurationError, match=name) as exc_info:
            Config.from_env(env_file=empty_env_file)
        assert exc_info.value.variable == name

    def test_logging_settings_from_dotenv(self, dotenv_vars, tmp_path):
        dotenv_vars('SPORTS_DATA_API_KEY', 'NBA_ENDPOINT', 'LOG_LEVEL', 'ENVIRONMENT')
        env_file = tmp_path / '.env'
        env_file.write_text(
            'SPORTS_DATA_API_KEY=k\nNBA_ENDPOINT=https://e\nLOG_LEVEL=DEBUG\nENVIRONMENT=prod\n'
        )

        config = Config.from_env(env_file=str(env_file))

        assert config.logging.log_level == 'DEBUG'
        assert config.logging.environment == 'prod'
