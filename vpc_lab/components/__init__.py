"""
Pulumi component resources for the secure VPC lab.

Each submodule provides reusable ComponentResource classes:
- networking: VPC, subnets, gateways, route tables, security group
- security: IAM role and instance profile
- compute: EC2 instances
"""
