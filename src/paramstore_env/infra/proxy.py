"""Proxy configuration from the process environment."""

import os
from typing import Optional

from ..domain.host import ProxyConfiguration
from ..domain.interfaces import Logger, ProxyConfigurationProvider


class EnvironmentProxyProvider(ProxyConfigurationProvider):
    """Reads PROXY_HOST, PROXY_PORT, PROXY_USERNAME and PROXY_PASSWORD."""

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger

    def get_proxy(self) -> Optional[ProxyConfiguration]:
        host = os.getenv("PROXY_HOST")
        if not host:
            return None

        port = None
        raw_port = os.getenv("PROXY_PORT")
        if raw_port:
            try:
                port = int(raw_port)
            except ValueError:
                if self.logger:
                    self.logger.warning("Ignoring invalid PROXY_PORT", proxy_port=raw_port)

        return ProxyConfiguration(
            host=host,
            port=port,
            username=os.getenv("PROXY_USERNAME") or None,
            password=os.getenv("PROXY_PASSWORD") or None,
        )
