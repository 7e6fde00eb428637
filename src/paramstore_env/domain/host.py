"""Host-provided values: credentials, proxy settings and UI list options."""

from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import quote


@dataclass(frozen=True)
class Credential:
    """AWS credentials the parameter store client authenticates with."""

    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: Optional[str] = field(default=None, repr=False)


@dataclass(frozen=True)
class ProxyConfiguration:
    """Outbound HTTP proxy settings."""

    host: str
    port: Optional[int] = None
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)

    def to_url(self) -> str:
        """Proxy URL in the form botocore expects."""
        auth = ""
        if self.username:
            auth = quote(self.username, safe="")
            if self.password:
                auth += ":" + quote(self.password, safe="")
            auth += "@"
        port = f":{self.port}" if self.port else ""
        return f"http://{auth}{self.host}{port}"


@dataclass(frozen=True)
class ListOption:
    """One entry of a selectable list."""

    name: str
    value: str

    @classmethod
    def of(cls, name: str) -> "ListOption":
        return cls(name=name, value=name)
