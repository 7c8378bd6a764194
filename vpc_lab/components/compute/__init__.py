"""
Compute components for the lab instances.

Components:
- Ec2InstanceComponent: EC2 instance (web server or private host)
- apache_user_data: First-boot script for the web server
"""

from vpc_lab.components.compute.instance import Ec2InstanceComponent, InstanceOutputs
from vpc_lab.components.compute.user_data import apache_user_data

__all__ = [
    "Ec2InstanceComponent",
    "InstanceOutputs",
    "apache_user_data",
]
