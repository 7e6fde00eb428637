"""Domain interfaces (Protocols)."""

from typing import Protocol, Optional, List, Any

from .host import Credential, ProxyConfiguration
from .parameter import ParameterRecord
from .result import FetchResult


class ParameterStoreClient(Protocol):
    """Parameter Store client interface."""

    def list_parameter_names(self) -> FetchResult[List[str]]:
        """List the names of every parameter visible to the caller."""
        ...

    def get_parameter_value(self, name: str, decrypt: bool = True) -> FetchResult[str]:
        """Get a single parameter value by exact name."""
        ...

    def get_parameters_by_path(
        self, path: str, recursive: bool, decrypt: bool = True
    ) -> FetchResult[List[ParameterRecord]]:
        """Get the parameters under a hierarchy path."""
        ...


class CredentialResolver(Protocol):
    """Resolves a credentials identifier to AWS credentials."""

    def resolve(self, credentials_id: Optional[str]) -> Optional[Credential]:
        """Look up credentials, None means use the default chain."""
        ...

    def list_credential_ids(self) -> List[str]:
        """Selectable credential identifiers."""
        ...


class RegionRegistry(Protocol):
    """Known AWS regions."""

    default_region: str

    def lookup(self, region_name: Optional[str]) -> Optional[str]:
        """Return the region name if it is known, else None."""
        ...

    def region_names(self) -> List[str]:
        """Selectable region names."""
        ...


class ProxyConfigurationProvider(Protocol):
    """Source of outbound proxy settings."""

    def get_proxy(self) -> Optional[ProxyConfiguration]:
        """Get the proxy configuration, if any."""
        ...


class MetricsClient(Protocol):
    """CloudWatch Metrics client interface."""

    def put_metric(self, metric_name: str, value: float, unit: str = "Count") -> None:
        """Put a custom metric."""
        ...


class Logger(Protocol):
    """Logger interface."""

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        ...

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        ...
