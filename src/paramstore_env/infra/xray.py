"""X-Ray instrumentation setup."""

import os
from aws_xray_sdk import global_sdk_config
from aws_xray_sdk.core import xray_recorder
from aws_xray_sdk.core import patch as xray_patch


def setup_xray(service_name: str = "paramstore-env") -> bool:
    """Set up X-Ray tracing. Returns False when tracing stays off."""
    # Local stacks skip X-Ray; capture decorators must not look for a segment
    if os.getenv("AWS_ENDPOINT_URL"):
        global_sdk_config.set_sdk_enabled(False)
        return False
    if os.getenv("AWS_XRAY_SDK_ENABLED", "true").lower() == "false":
        return False

    xray_recorder.configure(
        service=service_name,
        context_missing="LOG_ERROR",
        sampling_rules={"version": 1, "default": {"fixed_target": 1, "rate": 0.1}},
    )

    # Patch boto3 for X-Ray tracing
    xray_patch(["boto3"])
    return True
