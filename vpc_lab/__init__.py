"""
Pulumi infrastructure-as-code for the secure VPC lab.

This package defines AWS infrastructure including:
- VPC with a public and a private subnet in separate AZs
- Internet gateway, NAT gateway and per-tier route tables
- Shared security group allowing SSH and HTTP
- SSM-enabled IAM role and instance profile
- Apache web server in the public subnet, private instance behind NAT
"""
