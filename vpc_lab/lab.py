"""
Composition of the lab stack.

Instantiates all component resources in dependency order:
1. Network plan validation
2. VPC (subnets, IGW, NAT gateway, routes) -> Security Group
3. IAM role + instance profile
4. Web server (public) and private instance
"""

import pulumi

from vpc_lab.configs.base import LabConfig
from vpc_lab.configs.topology import TopologySpec, default_topology, validate_topology
from vpc_lab.utils.naming import ResourceNamer
from vpc_lab.utils.outputs import public_url

# Networking
from vpc_lab.components.networking.vpc import VpcComponent
from vpc_lab.components.networking.security_groups import SecurityGroupsComponent

# Security
from vpc_lab.components.security.iam_roles import IamRolesComponent

# Compute
from vpc_lab.components.compute.instance import Ec2InstanceComponent
from vpc_lab.components.compute.user_data import apache_user_data

PROJECT_NAME = "secure-vpc-lab"


def deploy_lab(
    config: LabConfig,
    topology: TopologySpec | None = None,
) -> dict[str, pulumi.Output[str]]:
    """
    Declare every lab resource.

    Args:
        config: Stack configuration
        topology: Network plan; the default lab plan when omitted

    Returns:
        Stack outputs keyed by export name

    Raises:
        TopologyError: If the network plan is invalid
    """
    topology = validate_topology(topology or default_topology())
    namer = ResourceNamer(project=PROJECT_NAME, environment=config.environment)
    base_name = namer.name()

    # --- Layer 1: Networking Foundation ---
    vpc = VpcComponent(
        name=base_name,
        environment=config.environment,
        topology=topology,
    )
    vpc_outputs = vpc.get_outputs()

    security_groups = SecurityGroupsComponent(
        name=base_name,
        environment=config.environment,
        vpc_id=vpc_outputs.vpc_id,
        ingress_rules=topology.ingress_rules,
    )
    sg_outputs = security_groups.get_outputs()

    # --- Layer 2: IAM Roles ---
    iam_roles = IamRolesComponent(
        name=base_name,
        environment=config.environment,
    )
    iam_outputs = iam_roles.get_outputs()

    # --- Layer 3: Compute ---
    web_server = Ec2InstanceComponent(
        name=namer.name("web"),
        environment=config.environment,
        config=config,
        subnet_id=vpc_outputs.public_subnet_id,
        security_group_id=sg_outputs.instance_sg_id,
        instance_profile_name=iam_outputs.instance_profile_name,
        user_data=apache_user_data(config.welcome_message),
    )
    web_outputs = web_server.get_outputs()

    private_instance = Ec2InstanceComponent(
        name=namer.name("private"),
        environment=config.environment,
        config=config,
        subnet_id=vpc_outputs.private_subnet_id,
        security_group_id=sg_outputs.instance_sg_id,
        instance_profile_name=iam_outputs.instance_profile_name,
    )
    private_outputs = private_instance.get_outputs()

    return {
        "public_instance_id": web_outputs.instance_id,
        "private_instance_id": private_outputs.instance_id,
        "public_url": public_url(web_outputs.public_ip),
    }
