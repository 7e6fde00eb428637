"""Build wrapper that prepares a build environment from the parameter store."""

import os
from typing import MutableMapping, Optional

from ..domain.interfaces import (
    CredentialResolver,
    Logger,
    MetricsClient,
    ProxyConfigurationProvider,
    RegionRegistry,
)
from ..infra.credentials import ProfileCredentialResolver
from ..infra.metrics import CloudWatchMetricsClient, NullMetricsClient
from ..infra.parameter_store import ParameterStoreClientImpl
from ..infra.proxy import EnvironmentProxyProvider
from ..infra.regions import DEFAULT_REGION, BotocoreRegionRegistry
from .parameter_resolver import ParameterResolver


class HostServices:
    """Collaborators supplied by the host running the build."""

    def __init__(
        self,
        credential_resolver: CredentialResolver,
        region_registry: RegionRegistry,
        logger: Logger,
        proxy_provider: Optional[ProxyConfigurationProvider] = None,
        metrics_client: Optional[MetricsClient] = None,
    ):
        self.credential_resolver = credential_resolver
        self.region_registry = region_registry
        self.logger = logger
        self.proxy_provider = proxy_provider
        self.metrics_client = metrics_client or NullMetricsClient()

    @classmethod
    def from_env(cls, logger: Logger) -> "HostServices":
        """Wire the default collaborators from the process environment."""
        region_registry = BotocoreRegionRegistry()

        metrics_client: MetricsClient = NullMetricsClient()
        namespace = os.getenv("METRICS_NAMESPACE")
        if namespace:
            region = os.getenv("AWS_REGION", region_registry.default_region)
            metrics_client = CloudWatchMetricsClient(namespace=namespace, region=region, logger=logger)

        return cls(
            credential_resolver=ProfileCredentialResolver(logger),
            region_registry=region_registry,
            logger=logger,
            proxy_provider=EnvironmentProxyProvider(logger),
            metrics_client=metrics_client,
        )


class BuildWrapper:
    """Injects parameter store values into a build's environment."""

    def __init__(
        self,
        credentials_id: Optional[str] = None,
        region_name: Optional[str] = DEFAULT_REGION,
        path: Optional[str] = None,
        recursive: Optional[bool] = False,
    ):
        """
        Args:
            credentials_id: AWS credentials identifier, None for the default chain.
            region_name: AWS region name, unknown names fall back to us-east-1.
            path: Hierarchy for the parameters, empty to fetch every parameter.
            recursive: Fetch all parameters within the hierarchy.
        """
        self._credentials_id = credentials_id
        self._region_name = region_name
        self._path = path
        self._recursive = recursive

    @property
    def credentials_id(self) -> Optional[str]:
        return self._credentials_id

    @property
    def region_name(self) -> Optional[str]:
        return self._region_name

    @property
    def path(self) -> Optional[str]:
        return self._path

    @property
    def recursive(self) -> Optional[bool]:
        return self._recursive

    def set_up(self, services: HostServices) -> "BuildEnvironment":
        """Create the environment for one build, with its own store client."""
        parameter_store = ParameterStoreClientImpl(
            credentials_id=self._credentials_id,
            region_name=self._region_name,
            credential_resolver=services.credential_resolver,
            region_registry=services.region_registry,
            proxy_provider=services.proxy_provider,
        )
        resolver = ParameterResolver(
            parameter_store=parameter_store,
            logger=services.logger,
            metrics_client=services.metrics_client,
        )
        return BuildEnvironment(resolver, self._path, self._recursive)


class BuildEnvironment:
    """Environment contributed to a single build."""

    def __init__(self, resolver: ParameterResolver, path: Optional[str], recursive: Optional[bool]):
        self.resolver = resolver
        self.path = path
        self.recursive = recursive

    def build_env_vars(self, env: MutableMapping[str, str]) -> int:
        """Add the parameter store variables to ``env``."""
        return self.resolver.populate_environment(env, self.path, self.recursive)
