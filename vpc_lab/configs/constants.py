"""
Infrastructure constants for the secure VPC lab.

Contains CIDR blocks, ports, instance defaults, and default tags.
"""

from typing import Final

# VPC Configuration
VPC_CIDR: Final[str] = "10.0.0.0/16"

# Subnet CIDR blocks
SUBNET_CIDRS: Final[dict[str, str]] = {
    "public": "10.0.1.0/24",   # Web server, NAT gateway
    "private": "10.0.2.0/24",  # Private instance (SSM only)
}

# Destination/source block matching every IPv4 address
ANY_IPV4: Final[str] = "0.0.0.0/0"

# Ports opened on the instance security group
INGRESS_PORTS: Final[dict[str, int]] = {
    "ssh": 22,
    "http": 80,
}

# EC2 defaults
DEFAULT_INSTANCE_TYPE: Final[str] = "t2.micro"

# Amazon Linux 2 AMI (region-specific, may go stale)
DEFAULT_IMAGE_ID: Final[str] = "ami-02b7d5b1e55a7b5f1"

DEFAULT_WELCOME_MESSAGE: Final[str] = "Welcome to the secure VPC lab! Apache is running"

# IAM
EC2_SERVICE_PRINCIPAL: Final[str] = "ec2.amazonaws.com"
SSM_MANAGED_POLICY_ARN: Final[str] = "arn:aws:iam::aws:policy/AmazonSSMManagedInstanceCore"

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": "secure-vpc-lab",
    "ManagedBy": "pulumi",
}
