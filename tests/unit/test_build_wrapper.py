"""Unit tests for BuildWrapper and BuildWrapperDescriptor."""

import pytest
from unittest.mock import Mock
from paramstore_env.domain.host import ListOption
from paramstore_env.infra.metrics import CloudWatchMetricsClient, NullMetricsClient
from paramstore_env.infra.regions import BotocoreRegionRegistry
from paramstore_env.service.build_wrapper import BuildWrapper, HostServices
from paramstore_env.service.descriptor import BuildWrapperDescriptor, SELECT_PLACEHOLDER


@pytest.fixture
def host_services(mock_logger):
    """Host services with default credentials and real region data."""
    credential_resolver = Mock()
    credential_resolver.resolve.return_value = None
    return HostServices(
        credential_resolver=credential_resolver,
        region_registry=BotocoreRegionRegistry(),
        logger=mock_logger,
    )


def test_construction_parameters():
    """Test that the wrapper exposes its configuration."""
    wrapper = BuildWrapper("ci", "eu-west-1", "/service/", True)

    assert wrapper.credentials_id == "ci"
    assert wrapper.region_name == "eu-west-1"
    assert wrapper.path == "/service/"
    assert wrapper.recursive is True

    default = BuildWrapper()
    assert default.credentials_id is None
    assert default.region_name == "us-east-1"
    assert default.path is None
    assert default.recursive is False


def test_build_env_vars_by_path(ssm, host_services):
    """Test preparing a build environment from a path."""
    environment = BuildWrapper(path="/service/", recursive=False).set_up(host_services)
    env = {"HOME": "/home/build"}

    injected = environment.build_env_vars(env)

    assert injected == 2
    assert env == {"HOME": "/home/build", "NAME1": "value1", "NAME2": "value2"}


def test_build_env_vars_recursive(ssm, host_services):
    """Test that recursive fetches include nested parameters."""
    env = {}

    BuildWrapper(path="/service", recursive=True).set_up(host_services).build_env_vars(env)

    assert env == {"NAME1": "value1", "NAME2": "value2", "NAME4": "value4"}


def test_build_env_vars_flat(ssm, host_services):
    """Test that a flat scan picks up every parameter."""
    env = {}

    BuildWrapper().set_up(host_services).build_env_vars(env)

    assert env["NAME1"] == "value1"
    assert env["NAME2"] == "value2"
    assert env["NAME3"] == "value3"
    assert env["NAME4"] == "value4"


def test_each_build_gets_its_own_client(host_services):
    """Test that set up never shares a store client between builds."""
    wrapper = BuildWrapper(path="/service")

    first = wrapper.set_up(host_services)
    second = wrapper.set_up(host_services)

    assert first.resolver.parameter_store is not second.resolver.parameter_store


def test_host_services_from_env(mock_logger, monkeypatch):
    """Test default wiring, with metrics only when a namespace is configured."""
    services = HostServices.from_env(mock_logger)
    assert isinstance(services.metrics_client, NullMetricsClient)
    assert services.region_registry.default_region == "us-east-1"

    monkeypatch.setenv("METRICS_NAMESPACE", "Builds")
    services = HostServices.from_env(mock_logger)
    assert isinstance(services.metrics_client, CloudWatchMetricsClient)
    assert services.metrics_client.namespace == "Builds"


class TestDescriptor:
    """Tests for BuildWrapperDescriptor."""

    @pytest.fixture
    def descriptor(self):
        """Descriptor over mocked host lookups."""
        credential_resolver = Mock()
        credential_resolver.list_credential_ids.return_value = ["ci", "deploy"]
        region_registry = Mock()
        region_registry.region_names.return_value = ["us-west-2", "eu-west-1", "us-east-1"]
        return BuildWrapperDescriptor(credential_resolver, region_registry)

    def test_display_name_and_applicability(self, descriptor):
        """Test descriptor metadata."""
        assert descriptor.display_name
        assert descriptor.is_applicable(object()) is True

    def test_fill_credentials_id_items(self, descriptor):
        """Test credential options."""
        assert descriptor.fill_credentials_id_items() == [ListOption("ci", "ci"), ListOption("deploy", "deploy")]

    def test_fill_region_name_items(self, descriptor):
        """Test that regions are sorted after a placeholder."""
        names = [option.name for option in descriptor.fill_region_name_items()]

        assert names == [SELECT_PLACEHOLDER, "eu-west-1", "us-east-1", "us-west-2"]
