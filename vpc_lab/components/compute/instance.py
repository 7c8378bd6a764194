"""
EC2 Instance Component for the lab hosts.

Used twice:
- Web server: PUBLIC subnet, public IP on launch, Apache installed by user data.
  Reachable from the internet on ports 22 and 80.
- Private instance: PRIVATE subnet, no public IP, no user data. No inbound
  path from the internet; managed through Session Manager, outbound via NAT.

Key Components:
1. AMI + Key Pair: Supplied by stack config (image_id, key_name).
2. Instance Profile: Links the SSM role to the instance.
3. Placement: subnet_id and security group decide reachability.
4. IMDSv2 (http_tokens="required"): Secures metadata service against SSRF attacks.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from vpc_lab.configs.base import LabConfig
from vpc_lab.utils.tags import create_tags


@dataclass
class InstanceOutputs:
    """Output values from EC2 instance component."""
    instance_id: pulumi.Output[str]
    private_ip: pulumi.Output[str]
    public_ip: pulumi.Output[str]


class Ec2InstanceComponent(pulumi.ComponentResource):
    """
    Single EC2 instance placed in a lab subnet.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: LabConfig,
        subnet_id: pulumi.Input[str],
        security_group_id: pulumi.Input[str],
        instance_profile_name: pulumi.Input[str],
        user_data: str | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:Ec2Instance", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.instance = aws.ec2.Instance(
            f"{name}-instance",
            ami=config.image_id,
            instance_type=config.instance_type,
            key_name=config.key_name,
            subnet_id=subnet_id,
            vpc_security_group_ids=[security_group_id],
            iam_instance_profile=instance_profile_name,
            user_data=user_data,
            metadata_options=aws.ec2.InstanceMetadataOptionsArgs(
                http_tokens="required",  # IMDSv2
                http_endpoint="enabled",
            ),
            tags=create_tags(environment, f"{name}-instance"),
            opts=child_opts,
        )

        self.register_outputs({
            "instance_id": self.instance.id,
            "private_ip": self.instance.private_ip,
            "public_ip": self.instance.public_ip,
        })

    def get_outputs(self) -> InstanceOutputs:
        """Get EC2 output values."""
        return InstanceOutputs(
            instance_id=self.instance.id,
            private_ip=self.instance.private_ip,
            public_ip=self.instance.public_ip,
        )
