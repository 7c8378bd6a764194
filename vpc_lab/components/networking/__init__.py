"""
Networking components for the lab VPC.

Components:
- VpcComponent: VPC with public/private subnets, IGW, NAT gateway, route tables
- SecurityGroupsComponent: Shared instance security group (SSH, HTTP)
"""

from vpc_lab.components.networking.vpc import VpcComponent, VpcOutputs
from vpc_lab.components.networking.security_groups import SecurityGroupsComponent, SecurityGroupOutputs

__all__ = [
    "VpcComponent",
    "VpcOutputs",
    "SecurityGroupsComponent",
    "SecurityGroupOutputs",
]
