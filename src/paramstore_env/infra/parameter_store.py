"""Parameter Store client implementation."""

import os
from typing import Any, Callable, Dict, List, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from aws_xray_sdk.core import xray_recorder

from ..domain.interfaces import (
    CredentialResolver,
    ParameterStoreClient,
    ProxyConfigurationProvider,
    RegionRegistry,
)
from ..domain.parameter import ParameterRecord
from ..domain.result import FetchError, FetchResult

# DescribeParameters accepts at most 50 results per page
DESCRIBE_PAGE_SIZE = 50


class ParameterStoreClientImpl(ParameterStoreClient):
    """Parameter Store client bound to one credentials id and region.

    The boto3 client is created on first use and reused afterwards. Every
    remote operation returns a FetchResult; no boto3 error escapes.
    """

    def __init__(
        self,
        credentials_id: Optional[str],
        region_name: Optional[str],
        credential_resolver: CredentialResolver,
        region_registry: RegionRegistry,
        proxy_provider: Optional[ProxyConfigurationProvider] = None,
        page_size: int = DESCRIBE_PAGE_SIZE,
    ):
        """Initialize client settings, no connection is made yet."""
        self.credentials_id = credentials_id
        self.region_name = region_name
        self.credential_resolver = credential_resolver
        self.region_registry = region_registry
        self.proxy_provider = proxy_provider
        self.page_size = page_size
        self._ssm: Any = None

    @property
    def region(self) -> str:
        """Region the client talks to, falling back to the registry default."""
        return self.region_registry.lookup(self.region_name) or self.region_registry.default_region

    def connect(self) -> Any:
        """Get the SSM client (lazy initialization).

        Raises:
            FetchError: If the client cannot be built, e.g. for a malformed
                AWS_ENDPOINT_URL.
        """
        if self._ssm is None:
            client_kwargs: Dict[str, Any] = {
                "region_name": self.region,
                "endpoint_url": os.getenv("AWS_ENDPOINT_URL"),
            }

            proxy = self.proxy_provider.get_proxy() if self.proxy_provider else None
            if proxy is not None:
                url = proxy.to_url()
                client_kwargs["config"] = Config(proxies={"http": url, "https": url})

            credential = self.credential_resolver.resolve(self.credentials_id)
            if credential is not None:
                client_kwargs["aws_access_key_id"] = credential.access_key_id
                client_kwargs["aws_secret_access_key"] = credential.secret_access_key
                client_kwargs["aws_session_token"] = credential.session_token

            try:
                self._ssm = boto3.client("ssm", **client_kwargs)
            except (BotoCoreError, ValueError) as e:
                raise FetchError("Connect", _describe(e)) from e
        return self._ssm

    @xray_recorder.capture("ssm_describe_parameters")
    def list_parameter_names(self) -> FetchResult[List[str]]:
        """List every parameter name, following NextToken until exhausted."""
        names: List[str] = []

        def collect(response: Dict[str, Any]) -> None:
            for metadata in response["Parameters"]:
                names.append(metadata["Name"])

        try:
            self._paginate(
                "DescribeParameters",
                lambda **kwargs: self.connect().describe_parameters(**kwargs),
                {"MaxResults": self.page_size},
                collect,
            )
        except FetchError as e:
            return FetchResult.failure(e)
        return FetchResult.ok(names)

    @xray_recorder.capture("ssm_get_parameter")
    def get_parameter_value(self, name: str, decrypt: bool = True) -> FetchResult[str]:
        """Get a single parameter value by name."""
        try:
            response = self.connect().get_parameter(Name=name, WithDecryption=decrypt)
            return FetchResult.ok(response["Parameter"]["Value"])
        except FetchError as e:
            return FetchResult.failure(FetchError(e.operation, e.message, name=name, code=e.code))
        except ClientError as e:
            return FetchResult.failure(_client_error("GetParameter", e, name=name))
        except (BotoCoreError, KeyError, TypeError) as e:
            return FetchResult.failure(FetchError("GetParameter", _describe(e), name=name))

    @xray_recorder.capture("ssm_get_parameters_by_path")
    def get_parameters_by_path(
        self, path: str, recursive: bool, decrypt: bool = True
    ) -> FetchResult[List[ParameterRecord]]:
        """Get all parameters under ``path``, following NextToken until exhausted."""
        records: List[ParameterRecord] = []

        def collect(response: Dict[str, Any]) -> None:
            for parameter in response["Parameters"]:
                records.append(ParameterRecord(parameter["Name"], parameter["Value"]))

        try:
            self._paginate(
                "GetParametersByPath",
                lambda **kwargs: self.connect().get_parameters_by_path(**kwargs),
                {"Path": path, "Recursive": bool(recursive), "WithDecryption": decrypt},
                collect,
            )
        except FetchError as e:
            return FetchResult.failure(e)
        return FetchResult.ok(records)

    def _paginate(
        self,
        operation: str,
        call: Callable[..., Dict[str, Any]],
        request: Dict[str, Any],
        collect: Callable[[Dict[str, Any]], None],
    ) -> None:
        """Issue ``call`` until the store stops returning a NextToken.

        Raises:
            FetchError: If a call fails, a response is malformed, or the
                store hands back a token it already returned.
        """
        seen_tokens = set()
        next_token: Optional[str] = None
        while True:
            kwargs = dict(request)
            if next_token:
                kwargs["NextToken"] = next_token
            try:
                response = call(**kwargs)
                collect(response)
            except ClientError as e:
                raise _client_error(operation, e) from e
            except (BotoCoreError, KeyError, TypeError) as e:
                raise FetchError(operation, _describe(e)) from e

            next_token = response.get("NextToken")
            if not next_token:
                return
            if next_token in seen_tokens:
                raise FetchError(operation, "pagination did not terminate, NextToken repeated")
            seen_tokens.add(next_token)


def _client_error(operation: str, error: ClientError, name: Optional[str] = None) -> FetchError:
    details = error.response.get("Error", {})
    return FetchError(
        operation,
        details.get("Message") or str(error),
        name=name,
        code=details.get("Code"),
    )


def _describe(error: Exception) -> str:
    if isinstance(error, KeyError):
        return f"malformed response, missing {error}"
    return str(error) or type(error).__name__
