"""
Security Group Component for the lab instances.

One security group is shared by the web server and the private instance.

Rules:
- Ingress: explicit allow rules only, one per plan entry (SSH 22, HTTP 80
  from anywhere by default). Nothing else is opened.
- Egress: all outbound traffic. CloudFormation adds this rule implicitly;
  the AWS provider does not, so it is declared here.
- Security groups are stateful: replies to allowed inbound traffic are
  allowed automatically.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from vpc_lab.configs.constants import ANY_IPV4
from vpc_lab.configs.topology import IngressRuleSpec
from vpc_lab.utils.tags import create_tags


@dataclass
class SecurityGroupOutputs:
    """Output values from security groups component."""
    instance_sg_id: pulumi.Output[str]


class SecurityGroupsComponent(pulumi.ComponentResource):
    """
    Instance security group with explicit ingress rules.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_id: pulumi.Input[str],
        ingress_rules: tuple[IngressRuleSpec, ...],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:SecurityGroups", name, None, opts)
        self.environment = environment

        child_opts = pulumi.ResourceOptions(parent=self)

        ports = " and ".join(
            f"{rule.name.upper()} ({rule.from_port})" for rule in ingress_rules
        )
        self.instance_sg = aws.ec2.SecurityGroup(
            f"{name}-instance-sg",
            description=f"Allow {ports}" if ports else "Lab instances",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-instance-sg"),
            opts=child_opts,
        )

        self._create_rules(name, ingress_rules, child_opts)

        self.register_outputs({
            "instance_sg_id": self.instance_sg.id,
        })

    def _create_rules(
        self,
        name: str,
        ingress_rules: tuple[IngressRuleSpec, ...],
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create security group rules."""
        self.ingress_rules: dict[str, aws.vpc.SecurityGroupIngressRule] = {}
        for rule in ingress_rules:
            self.ingress_rules[rule.name] = aws.vpc.SecurityGroupIngressRule(
                f"{name}-instance-ingress-{rule.name}",
                security_group_id=self.instance_sg.id,
                ip_protocol=rule.protocol,
                from_port=rule.from_port,
                to_port=rule.to_port,
                cidr_ipv4=rule.cidr_ipv4,
                description=f"{rule.name.upper()} from {rule.cidr_ipv4}",
                opts=opts,
            )

        # All outbound
        self.egress_all = aws.vpc.SecurityGroupEgressRule(
            f"{name}-instance-egress-all",
            security_group_id=self.instance_sg.id,
            ip_protocol="-1",
            cidr_ipv4=ANY_IPV4,
            description="All outbound traffic",
            opts=opts,
        )

    def get_outputs(self) -> SecurityGroupOutputs:
        """Get security group output values."""
        return SecurityGroupOutputs(
            instance_sg_id=self.instance_sg.id,
        )
