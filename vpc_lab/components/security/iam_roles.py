"""
IAM roles component for the lab instances.

Creates:
- EC2 instance role trusted by the EC2 service
- AmazonSSMManagedInstanceCore attachment (Session Manager access)
- Instance profile wrapping the role

With this profile, the private instance is reachable through Session
Manager without any inbound path.
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from vpc_lab.configs.constants import EC2_SERVICE_PRINCIPAL, SSM_MANAGED_POLICY_ARN
from vpc_lab.utils.tags import create_tags


@dataclass
class IamRoleOutputs:
    """Output values from IAM roles component."""
    ssm_role_arn: pulumi.Output[str]
    instance_profile_name: pulumi.Output[str]
    instance_profile_arn: pulumi.Output[str]


def ec2_assume_role_policy() -> str:
    """Trust policy letting EC2 instances assume the role."""
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [{
            "Effect": "Allow",
            "Principal": {"Service": EC2_SERVICE_PRINCIPAL},
            "Action": "sts:AssumeRole",
        }],
    })


class IamRolesComponent(pulumi.ComponentResource):
    """
    SSM-enabled IAM role and instance profile for EC2.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:IamRoles", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # SSM Role
        self.ssm_role = aws.iam.Role(
            f"{name}-ssm-role",
            path="/",
            assume_role_policy=ec2_assume_role_policy(),
            tags=create_tags(environment, f"{name}-ssm-role"),
            opts=child_opts,
        )

        # Session Manager permissions
        self.ssm_policy_attachment = aws.iam.RolePolicyAttachment(
            f"{name}-ssm-core",
            role=self.ssm_role.name,
            policy_arn=SSM_MANAGED_POLICY_ARN,
            opts=child_opts,
        )

        # Instance Profile
        self.instance_profile = aws.iam.InstanceProfile(
            f"{name}-ssm-profile",
            path="/",
            role=self.ssm_role.name,
            tags=create_tags(environment, f"{name}-ssm-profile"),
            opts=child_opts,
        )

        self.register_outputs({
            "ssm_role_arn": self.ssm_role.arn,
            "instance_profile_name": self.instance_profile.name,
            "instance_profile_arn": self.instance_profile.arn,
        })

    def get_outputs(self) -> IamRoleOutputs:
        """Get IAM role output values."""
        return IamRoleOutputs(
            ssm_role_arn=self.ssm_role.arn,
            instance_profile_name=self.instance_profile.name,
            instance_profile_arn=self.instance_profile.arn,
        )
