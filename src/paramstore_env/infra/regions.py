"""AWS region registry backed by botocore endpoint data."""

from typing import List, Optional

import boto3

from ..domain.interfaces import RegionRegistry

DEFAULT_REGION = "us-east-1"


class BotocoreRegionRegistry(RegionRegistry):
    """Regions where SSM is available, across all known partitions."""

    def __init__(self, service_name: str = "ssm", default_region: str = DEFAULT_REGION):
        self.service_name = service_name
        self.default_region = default_region
        self._regions: Optional[List[str]] = None

    def region_names(self) -> List[str]:
        """Sorted region names."""
        if self._regions is None:
            session = boto3.session.Session()
            regions = set()
            for partition in session.get_available_partitions():
                regions.update(
                    session.get_available_regions(self.service_name, partition_name=partition)
                )
            self._regions = sorted(regions)
        return list(self._regions)

    def lookup(self, region_name: Optional[str]) -> Optional[str]:
        """Return ``region_name`` if it is a known region."""
        if region_name and region_name in self.region_names():
            return region_name
        return None
