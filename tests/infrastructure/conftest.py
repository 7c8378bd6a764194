"""Pytest fixtures for infrastructure tests.

Pulumi mocks are installed at import time so every test module can declare
resources without a running engine. The mock assigns deterministic IDs and
fills in the provider-computed attributes the lab reads back (allocation
IDs, ARNs, public IPs).
"""

from pathlib import Path

import pulumi
import pytest

from vpc_lab.configs.base import LabConfig

PROJECT = "secure-vpc-lab"
STACK = "test"

MOCK_ZONES = ["us-east-1a", "us-east-1b", "us-east-1c"]
MOCK_PUBLIC_IP = "203.0.113.10"


class LabMocks(pulumi.runtime.Mocks):
    """Deterministic stand-in for the AWS provider."""

    def __init__(self) -> None:
        self.public_subnet_ids: set[str] = set()

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        outputs = dict(args.inputs)
        resource_id = f"{args.name}_id"

        if args.typ == "aws:ec2/eip:Eip":
            outputs["allocationId"] = f"eipalloc-{args.name}"
            outputs["publicIp"] = "198.51.100.7"
        elif args.typ == "aws:ec2/subnet:Subnet":
            if args.inputs.get("mapPublicIpOnLaunch"):
                self.public_subnet_ids.add(resource_id)
        elif args.typ == "aws:ec2/instance:Instance":
            outputs["privateIp"] = "10.0.0.10"
            # Public IP only when launched into a subnet that maps one
            if args.inputs.get("subnetId") in self.public_subnet_ids:
                outputs["publicIp"] = MOCK_PUBLIC_IP
        elif args.typ in ("aws:iam/role:Role", "aws:iam/instanceProfile:InstanceProfile"):
            outputs.setdefault("name", args.name)
            outputs["arn"] = f"arn:aws:iam::123456789012:role/{args.name}"

        return [resource_id, outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        if args.token == "aws:index/getAvailabilityZones:getAvailabilityZones":
            return {
                "id": "us-east-1",
                "names": MOCK_ZONES,
                "zoneIds": [f"use1-az{i}" for i in range(1, len(MOCK_ZONES) + 1)],
            }
        return {}


pulumi.runtime.set_mocks(LabMocks(), project=PROJECT, stack=STACK, preview=False)


@pytest.fixture
def lab_config() -> LabConfig:
    """Configuration used by component and stack tests."""
    return LabConfig(
        environment="test",
        key_name="lab-key",
        image_id="ami-0123456789abcdef0",
        instance_type="t2.micro",
        welcome_message="Hello from the lab",
    )


@pytest.fixture
def package_root() -> Path:
    """Return the vpc_lab package directory."""
    return Path(__file__).parent.parent.parent / "vpc_lab"


@pytest.fixture
def python_files_in_package(package_root):
    """Return all Python files in the vpc_lab package."""
    return [f for f in package_root.rglob("*.py") if "__pycache__" not in str(f)]
