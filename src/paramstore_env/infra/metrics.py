"""CloudWatch Metrics client implementation."""

import os
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from aws_xray_sdk.core import xray_recorder

from ..domain.interfaces import Logger, MetricsClient


class CloudWatchMetricsClient(MetricsClient):
    """CloudWatch Metrics client implementation."""

    def __init__(
        self,
        namespace: str = "ParameterStoreEnv",
        region: str = "us-east-1",
        logger: Optional[Logger] = None,
    ):
        """Initialize CloudWatch client."""
        endpoint_url = os.getenv("AWS_ENDPOINT_URL")
        self.cloudwatch = boto3.client(
            "cloudwatch",
            region_name=region,
            endpoint_url=endpoint_url,
        )
        self.namespace = namespace
        self.logger = logger

    @xray_recorder.capture("cloudwatch_put_metric")
    def put_metric(self, metric_name: str, value: float, unit: str = "Count") -> None:
        """Put a custom metric."""
        try:
            self.cloudwatch.put_metric_data(
                Namespace=self.namespace,
                MetricData=[
                    {
                        "MetricName": metric_name,
                        "Value": value,
                        "Unit": unit,
                    }
                ],
            )
        except (ClientError, BotoCoreError) as e:
            # Don't fail the build if metrics fail
            if self.logger:
                self.logger.warning("Failed to put metric", metric_name=metric_name, error=str(e))


class NullMetricsClient(MetricsClient):
    """Metrics client that drops everything."""

    def put_metric(self, metric_name: str, value: float, unit: str = "Count") -> None:
        return None
