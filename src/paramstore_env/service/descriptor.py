"""Descriptor data for configuring the build wrapper."""

from typing import Any, List

from ..domain.host import ListOption
from ..domain.interfaces import CredentialResolver, RegionRegistry

DISPLAY_NAME = "With AWS Parameter Store environment variables"
SELECT_PLACEHOLDER = "- select -"


class BuildWrapperDescriptor:
    """Read-only lookups backing the wrapper's configuration form."""

    def __init__(self, credential_resolver: CredentialResolver, region_registry: RegionRegistry):
        self.credential_resolver = credential_resolver
        self.region_registry = region_registry

    @property
    def display_name(self) -> str:
        return DISPLAY_NAME

    def is_applicable(self, project: Any = None) -> bool:
        """The wrapper can be used with any project."""
        return True

    def fill_credentials_id_items(self) -> List[ListOption]:
        """Selectable AWS credentials identifiers."""
        return [ListOption.of(credentials_id) for credentials_id in self.credential_resolver.list_credential_ids()]

    def fill_region_name_items(self) -> List[ListOption]:
        """Placeholder followed by the sorted AWS region names."""
        options = [ListOption.of(SELECT_PLACEHOLDER)]
        options.extend(ListOption.of(name) for name in sorted(self.region_registry.region_names()))
        return options
