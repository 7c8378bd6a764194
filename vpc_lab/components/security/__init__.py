"""
Security components for IAM.

Components:
- IamRolesComponent: SSM role and instance profile for EC2
"""

from vpc_lab.components.security.iam_roles import IamRolesComponent, IamRoleOutputs

__all__ = [
    "IamRolesComponent",
    "IamRoleOutputs",
]
