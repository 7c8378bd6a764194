"""
Tests for the composed lab stack, config loading and output helpers.

Validates:
1. deploy_lab yields exactly two instance IDs and one URL
2. The URL is http:// plus a dotted-quad IPv4 address
3. Invalid network plans stop the program before any resource is declared
4. get_config applies defaults and rejects bad values
5. Outputs are mirrored to a .env file
"""

import ipaddress
from dataclasses import replace
from urllib.parse import urlparse

import pulumi
import pytest

from vpc_lab.configs import environment
from vpc_lab.configs.base import LabConfig
from vpc_lab.configs.constants import (
    DEFAULT_IMAGE_ID,
    DEFAULT_INSTANCE_TYPE,
    DEFAULT_WELCOME_MESSAGE,
)
from vpc_lab.configs.topology import TopologyError, default_topology
from vpc_lab.lab import deploy_lab
from vpc_lab.utils.outputs import public_url, write_outputs_to_env

from conftest import MOCK_PUBLIC_IP, PROJECT


@pytest.fixture
def stack_config():
    """Seed the real stack config for this project; cleared afterwards."""
    def seed(**values: str) -> None:
        pulumi.runtime.set_all_config(
            {f"{PROJECT}:{key}": value for key, value in values.items()}
        )

    seed()
    yield seed
    seed()


class TestDeployLab:
    """End-to-end declaration against mocks."""

    @pulumi.runtime.test
    def test_outputs_are_two_ids_and_a_url(self, lab_config):
        outputs = deploy_lab(replace(lab_config, environment="outputs"))

        assert set(outputs) == {"public_instance_id", "private_instance_id", "public_url"}

        def check(args):
            public_id, private_id, url = args
            assert public_id == "secure-vpc-lab-outputs-web-instance_id"
            assert private_id == "secure-vpc-lab-outputs-private-instance_id"
            assert public_id != private_id

            parsed = urlparse(url)
            assert url.startswith("http://")
            assert parsed.scheme == "http"
            assert isinstance(ipaddress.ip_address(parsed.hostname), ipaddress.IPv4Address)
            assert parsed.hostname == MOCK_PUBLIC_IP

        return pulumi.Output.all(
            outputs["public_instance_id"],
            outputs["private_instance_id"],
            outputs["public_url"],
        ).apply(check)

    def test_invalid_topology_rejected_before_declaration(self, lab_config):
        broken = replace(default_topology(), nat_subnet="private")

        with pytest.raises(TopologyError, match="must be a public subnet"):
            deploy_lab(replace(lab_config, environment="broken"), topology=broken)


class TestOutputs:
    """Derived outputs and .env export."""

    @pulumi.runtime.test
    def test_public_url_format(self):
        return public_url(pulumi.Output.from_input("192.0.2.1")).apply(
            lambda url: _assert_equal(url, "http://192.0.2.1")
        )

    @pulumi.runtime.test
    def test_write_outputs_to_env(self, tmp_path):
        env_file = tmp_path / "lab.env"
        outputs = {
            "public_url": pulumi.Output.from_input("http://192.0.2.1"),
            "public_instance_id": "i-0123",
        }

        def check(content):
            assert env_file.read_text() == content
            assert content.splitlines() == [
                "PUBLIC_INSTANCE_ID=i-0123",
                "PUBLIC_URL=http://192.0.2.1",
            ]

        return write_outputs_to_env(outputs, str(env_file)).apply(check)


def _assert_equal(actual, expected):
    assert actual == expected


class TestGetConfig:
    """Stack configuration loading."""

    def test_defaults_applied(self, stack_config):
        stack_config(key_name="lab-key")

        config = environment.get_config()

        assert config == LabConfig(
            environment="dev",
            key_name="lab-key",
            image_id=DEFAULT_IMAGE_ID,
            instance_type=DEFAULT_INSTANCE_TYPE,
            welcome_message=DEFAULT_WELCOME_MESSAGE,
            outputs_env_file=None,
        )
        assert config.uses_default_image is True

    def test_explicit_values(self, stack_config):
        stack_config(
            key_name="prod-key",
            image_id="ami-0abcdef1234567890",
            environment="prod",
            instance_type="t3.micro",
            welcome_message="Hi",
            outputs_env_file="infrastructure.env",
        )

        config = environment.get_config()

        assert config.environment == "prod"
        assert config.image_id == "ami-0abcdef1234567890"
        assert config.instance_type == "t3.micro"
        assert config.outputs_env_file == "infrastructure.env"
        assert config.uses_default_image is False

    def test_missing_key_name(self, stack_config):
        stack_config(image_id=DEFAULT_IMAGE_ID)

        with pytest.raises(pulumi.ConfigMissingError) as exc_info:
            environment.get_config()

        assert exc_info.value.key == f"{PROJECT}:key_name"

    def test_blank_key_name(self, stack_config):
        stack_config(key_name="   ")

        with pytest.raises(ValueError, match="key_name"):
            environment.get_config()

    @pytest.mark.parametrize("image_id", ["ubuntu-22.04", "ami-XYZ", "ami-"])
    def test_invalid_image_id(self, stack_config, image_id):
        stack_config(key_name="lab-key", image_id=image_id)

        with pytest.raises(ValueError, match="not a valid AMI ID"):
            environment.get_config()
