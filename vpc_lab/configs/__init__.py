"""
Configuration module for the lab Pulumi program.

Provides type-safe configuration loading from Pulumi stack config files
and the validated network plan.
"""

from vpc_lab.configs.base import LabConfig
from vpc_lab.configs.environment import get_config
from vpc_lab.configs.constants import (
    VPC_CIDR,
    SUBNET_CIDRS,
    DEFAULT_TAGS,
    INGRESS_PORTS,
)
from vpc_lab.configs.topology import (
    TopologyError,
    TopologySpec,
    default_topology,
    validate_topology,
)

__all__ = [
    "LabConfig",
    "get_config",
    "VPC_CIDR",
    "SUBNET_CIDRS",
    "DEFAULT_TAGS",
    "INGRESS_PORTS",
    "TopologyError",
    "TopologySpec",
    "default_topology",
    "validate_topology",
]
