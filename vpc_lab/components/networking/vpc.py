"""
VPC Component Resource for the lab network.

Steps & Architecture:
1. VPC (10.0.0.0/16): The isolated network container, DNS support and hostnames on.
2. Internet Gateway (IGW) + Attachment: the "door" to the internet.
   - The attachment is a separate resource. Anything that uses the IGW as an
     egress path (the public default route, the NAT gateway's Elastic IP)
     must wait for it explicitly, since referencing the IGW id alone does not
     guarantee it is attached to the VPC yet.
3. Subnets (one per plan entry, each pinned to an available AZ):
   - Public (10.0.1.0/24): Web server and NAT gateway. Public IPs on launch.
   - Private (10.0.2.0/24): Private instance. No public IPs.
4. Elastic IP + NAT Gateway:
   - The NAT gateway sits in the public subnet and gives private instances
     outbound-only internet access.
5. Route Tables:
   - Public RT: 0.0.0.0/0 -> IGW.
   - Private RT: 0.0.0.0/0 -> NAT gateway. Never the IGW.
6. Associations: every subnet is associated with exactly one route table.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from vpc_lab.configs.constants import ANY_IPV4
from vpc_lab.configs.topology import (
    INTERNET_GATEWAY,
    NAT_GATEWAY,
    TopologyError,
    TopologySpec,
)
from vpc_lab.utils.tags import create_tags

_TABLE_KINDS = {INTERNET_GATEWAY: "public", NAT_GATEWAY: "private"}


@dataclass
class VpcOutputs:
    """Output values from VPC component."""
    vpc_id: pulumi.Output[str]
    internet_gateway_id: pulumi.Output[str]
    nat_gateway_id: pulumi.Output[str]
    public_subnet_id: pulumi.Output[str]
    private_subnet_id: pulumi.Output[str]
    public_route_table_id: pulumi.Output[str]
    private_route_table_id: pulumi.Output[str]


class VpcComponent(pulumi.ComponentResource):
    """
    VPC component with public/private subnets, IGW and NAT gateway.

    Declares the network described by a validated TopologySpec.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        topology: TopologySpec,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:Vpc", name, None, opts)
        self.environment = environment
        self.topology = topology

        child_opts = pulumi.ResourceOptions(parent=self)

        # Create VPC
        self.vpc = aws.ec2.Vpc(
            f"{name}-vpc",
            cidr_block=topology.vpc_cidr,
            enable_dns_hostnames=True,
            enable_dns_support=True,
            tags=create_tags(environment, f"{name}-vpc"),
            opts=child_opts,
        )

        # Create Internet Gateway and attach it explicitly
        self.igw = aws.ec2.InternetGateway(
            f"{name}-igw",
            tags=create_tags(environment, f"{name}-igw"),
            opts=child_opts,
        )

        self.igw_attachment = aws.ec2.InternetGatewayAttachment(
            f"{name}-igw-attachment",
            vpc_id=self.vpc.id,
            internet_gateway_id=self.igw.id,
            opts=child_opts,
        )

        # Options for resources that need the IGW attached first
        self._after_attachment = pulumi.ResourceOptions(
            parent=self,
            depends_on=[self.igw_attachment],
        )

        self._create_subnets(name, child_opts)
        self._create_nat_gateway(name, child_opts)
        self._create_route_tables(name, child_opts)

        self.register_outputs({
            "vpc_id": self.vpc.id,
            "internet_gateway_id": self.igw.id,
            "nat_gateway_id": self.nat_gateway.id,
            "public_subnet_id": self.public_subnet.id,
            "private_subnet_id": self.private_subnet.id,
            "public_route_table_id": self.route_tables["public"].id,
            "private_route_table_id": self.route_tables["private"].id,
        })

    def _create_subnets(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create one subnet per plan entry, each in its own AZ."""
        zones = aws.get_availability_zones(state="available").names
        self.subnets: dict[str, aws.ec2.Subnet] = {}

        for spec in self.topology.subnets:
            if spec.az_index >= len(zones):
                raise TopologyError([
                    f"subnet {spec.name!r} needs AZ index {spec.az_index} but the "
                    f"region only has {len(zones)} available zones"
                ])

            self.subnets[spec.name] = aws.ec2.Subnet(
                f"{name}-{spec.name}-subnet",
                vpc_id=self.vpc.id,
                cidr_block=spec.cidr_block,
                availability_zone=zones[spec.az_index],
                map_public_ip_on_launch=spec.map_public_ip_on_launch,
                tags=create_tags(self.environment, f"{name}-{spec.name}-subnet"),
                opts=opts,
            )

        self.public_subnet = self.subnets[self.topology.public_subnets[0].name]
        self.private_subnet = self.subnets[self.topology.private_subnets[0].name]

    def _create_nat_gateway(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create the Elastic IP and NAT gateway in the public subnet."""
        # EIP is only usable once the VPC has an attached IGW
        self.nat_eip = aws.ec2.Eip(
            f"{name}-nat-eip",
            domain="vpc",
            tags=create_tags(self.environment, f"{name}-nat-eip"),
            opts=self._after_attachment,
        )

        self.nat_gateway = aws.ec2.NatGateway(
            f"{name}-nat",
            allocation_id=self.nat_eip.allocation_id,
            subnet_id=self.subnets[self.topology.nat_subnet].id,
            tags=create_tags(self.environment, f"{name}-nat"),
            opts=opts,
        )

    def _create_route_tables(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create route tables, default routes and subnet associations."""
        self.route_tables: dict[str, aws.ec2.RouteTable] = {}
        self.routes: dict[str, aws.ec2.Route] = {}

        for target, kind in _TABLE_KINDS.items():
            table = aws.ec2.RouteTable(
                f"{name}-{kind}-rt",
                vpc_id=self.vpc.id,
                tags=create_tags(self.environment, f"{name}-{kind}-rt"),
                opts=opts,
            )
            self.route_tables[kind] = table

            if target == INTERNET_GATEWAY:
                # Public: 0.0.0.0/0 -> IGW, only after the IGW is attached
                self.routes[kind] = aws.ec2.Route(
                    f"{name}-{kind}-default-route",
                    route_table_id=table.id,
                    destination_cidr_block=ANY_IPV4,
                    gateway_id=self.igw.id,
                    opts=self._after_attachment,
                )
            else:
                # Private: 0.0.0.0/0 -> NAT gateway
                self.routes[kind] = aws.ec2.Route(
                    f"{name}-{kind}-default-route",
                    route_table_id=table.id,
                    destination_cidr_block=ANY_IPV4,
                    nat_gateway_id=self.nat_gateway.id,
                    opts=opts,
                )

        # Each subnet is associated with exactly one route table
        self.associations: dict[str, aws.ec2.RouteTableAssociation] = {}
        for spec in self.topology.subnets:
            kind = _TABLE_KINDS[spec.route.target]
            self.associations[spec.name] = aws.ec2.RouteTableAssociation(
                f"{name}-{spec.name}-rt-assoc",
                subnet_id=self.subnets[spec.name].id,
                route_table_id=self.route_tables[kind].id,
                opts=opts,
            )

    def get_outputs(self) -> VpcOutputs:
        """Get VPC output values."""
        return VpcOutputs(
            vpc_id=self.vpc.id,
            internet_gateway_id=self.igw.id,
            nat_gateway_id=self.nat_gateway.id,
            public_subnet_id=self.public_subnet.id,
            private_subnet_id=self.private_subnet.id,
            public_route_table_id=self.route_tables["public"].id,
            private_route_table_id=self.route_tables["private"].id,
        )
