"""Pytest configuration and fixtures."""

import os
from unittest.mock import Mock

import boto3
import pytest
from moto import mock_aws

# Set test environment variables before the package is imported
os.environ["AWS_ACCESS_KEY_ID"] = "test"
os.environ["AWS_SECRET_ACCESS_KEY"] = "test"
os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
os.environ["AWS_XRAY_SDK_ENABLED"] = "false"
os.environ["AWS_XRAY_CONTEXT_MISSING"] = "IGNORE_ERROR"
os.environ["AWS_EC2_METADATA_DISABLED"] = "true"
for name in (
    "AWS_ENDPOINT_URL",
    "AWS_PROFILE",
    "AWS_REGION",
    "METRICS_NAMESPACE",
    "PROXY_HOST",
    "PROXY_PORT",
    "PROXY_USERNAME",
    "PROXY_PASSWORD",
    "PARAMSTORE_CREDENTIALS_ID",
    "PARAMSTORE_REGION",
    "PARAMSTORE_PATH",
    "PARAMSTORE_RECURSIVE",
):
    os.environ.pop(name, None)


@pytest.fixture
def mock_logger():
    """Mock logger."""
    logger = Mock()
    logger.info.return_value = None
    logger.warning.return_value = None
    return logger


@pytest.fixture
def mock_metrics_client():
    """Mock Metrics client."""
    client = Mock()
    client.put_metric.return_value = None
    return client


@pytest.fixture
def aws_config_files(tmp_path, monkeypatch):
    """Point boto3 at shared config files with a ``ci`` and a ``deploy`` profile."""
    credentials = tmp_path / "credentials"
    credentials.write_text(
        "[ci]\n"
        "aws_access_key_id = AKIACI\n"
        "aws_secret_access_key = ci-secret\n"
        "\n"
        "[deploy]\n"
        "aws_access_key_id = AKIADEPLOY\n"
        "aws_secret_access_key = deploy-secret\n"
        "aws_session_token = deploy-token\n"
    )
    config = tmp_path / "config"
    config.write_text("[profile empty]\nregion = eu-west-1\n")
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(credentials))
    monkeypatch.setenv("AWS_CONFIG_FILE", str(config))
    return tmp_path


@pytest.fixture
def ssm():
    """Mocked SSM with a few parameters in us-east-1."""
    with mock_aws():
        client = boto3.client("ssm", region_name="us-east-1")
        client.put_parameter(Name="/service/name1", Value="value1", Type="String")
        client.put_parameter(Name="/service/name2", Value="value2", Type="SecureString")
        client.put_parameter(Name="/service/nested/name4", Value="value4", Type="String")
        client.put_parameter(Name="/ignore/name3", Value="value3", Type="String")
        yield client
