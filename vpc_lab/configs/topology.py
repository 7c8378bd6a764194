"""
Network plan for the lab VPC as plain data.

The plan is validated before any Pulumi resource is declared, so address
overlaps and unreachable default routes fail fast with a readable message
instead of surfacing later as a provider error.

Rules enforced by validate_topology():
- Every subnet block is a strict subset of the VPC block.
- Subnet blocks never overlap each other.
- Public subnets route 0.0.0.0/0 to the internet gateway and map public IPs.
- Private subnets route 0.0.0.0/0 to the NAT gateway, never the internet gateway.
- The NAT gateway lives in a public subnet.
- Ingress rules are explicit allows with valid ports and source blocks.
"""

import ipaddress
from dataclasses import dataclass, field

from vpc_lab.configs.constants import ANY_IPV4, INGRESS_PORTS, SUBNET_CIDRS, VPC_CIDR

INTERNET_GATEWAY = "internet_gateway"
NAT_GATEWAY = "nat_gateway"
ROUTE_TARGETS = (INTERNET_GATEWAY, NAT_GATEWAY)

IP_PROTOCOLS = ("tcp", "udp", "icmp")


class TopologyError(ValueError):
    """Raised when the network plan violates an addressing or routing rule."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("Invalid network topology:\n- " + "\n- ".join(problems))


@dataclass(frozen=True)
class RouteSpec:
    """Default route of a subnet's route table."""
    target: str
    destination: str = ANY_IPV4


@dataclass(frozen=True)
class SubnetSpec:
    """
    One subnet of the plan.

    Attributes:
        name: Short identifier, also used in resource names ('public', 'private')
        cidr_block: IPv4 block inside the VPC block
        az_index: Index into the region's available zones
        map_public_ip_on_launch: Assign public IPs to instances at launch
        route: Default route of the route table this subnet is associated with
    """
    name: str
    cidr_block: str
    az_index: int
    map_public_ip_on_launch: bool
    route: RouteSpec

    @property
    def is_public(self) -> bool:
        return self.route.target == INTERNET_GATEWAY


@dataclass(frozen=True)
class IngressRuleSpec:
    """Allow rule on the instance security group."""
    name: str
    from_port: int
    to_port: int
    protocol: str = "tcp"
    cidr_ipv4: str = ANY_IPV4


@dataclass(frozen=True)
class TopologySpec:
    """Full network plan: VPC block, subnets, NAT placement, ingress rules."""
    vpc_cidr: str
    subnets: tuple[SubnetSpec, ...]
    nat_subnet: str
    ingress_rules: tuple[IngressRuleSpec, ...] = field(default_factory=tuple)

    def subnet(self, name: str) -> SubnetSpec:
        """Look up a subnet by name."""
        for subnet in self.subnets:
            if subnet.name == name:
                return subnet
        raise KeyError(name)

    @property
    def public_subnets(self) -> tuple[SubnetSpec, ...]:
        return tuple(s for s in self.subnets if s.is_public)

    @property
    def private_subnets(self) -> tuple[SubnetSpec, ...]:
        return tuple(s for s in self.subnets if not s.is_public)


def default_topology() -> TopologySpec:
    """Return the lab plan: one public and one private subnet in separate AZs."""
    return TopologySpec(
        vpc_cidr=VPC_CIDR,
        subnets=(
            SubnetSpec(
                name="public",
                cidr_block=SUBNET_CIDRS["public"],
                az_index=0,
                map_public_ip_on_launch=True,
                route=RouteSpec(target=INTERNET_GATEWAY),
            ),
            SubnetSpec(
                name="private",
                cidr_block=SUBNET_CIDRS["private"],
                az_index=1,
                map_public_ip_on_launch=False,
                route=RouteSpec(target=NAT_GATEWAY),
            ),
        ),
        nat_subnet="public",
        ingress_rules=tuple(
            IngressRuleSpec(name=name, from_port=port, to_port=port)
            for name, port in INGRESS_PORTS.items()
        ),
    )


def _parse_network(value: str, what: str, problems: list[str]):
    try:
        return ipaddress.IPv4Network(value)
    except ValueError as e:
        problems.append(f"{what} {value!r} is not a valid IPv4 block: {e}")
        return None


def validate_topology(spec: TopologySpec) -> TopologySpec:
    """
    Validate a network plan.

    Args:
        spec: Plan to validate

    Returns:
        The same plan, so calls can be chained

    Raises:
        TopologyError: Listing every rule the plan breaks
    """
    problems: list[str] = []

    vpc_net = _parse_network(spec.vpc_cidr, "VPC block", problems)

    if not spec.public_subnets or not spec.private_subnets:
        problems.append("at least one public and one private subnet are required")

    seen_names: set[str] = set()
    parsed: list[tuple[SubnetSpec, ipaddress.IPv4Network]] = []
    for subnet in spec.subnets:
        if subnet.name in seen_names:
            problems.append(f"duplicate subnet name {subnet.name!r}")
        seen_names.add(subnet.name)

        if subnet.az_index < 0:
            problems.append(f"subnet {subnet.name!r} has a negative AZ index")

        net = _parse_network(subnet.cidr_block, f"subnet {subnet.name!r} block", problems)
        if net is not None:
            if vpc_net is not None and (net == vpc_net or not net.subnet_of(vpc_net)):
                problems.append(
                    f"subnet {subnet.name!r} block {subnet.cidr_block} is not a strict "
                    f"subset of VPC block {spec.vpc_cidr}"
                )
            parsed.append((subnet, net))

        route = subnet.route
        if route.target not in ROUTE_TARGETS:
            problems.append(f"subnet {subnet.name!r} routes to unknown target {route.target!r}")
        if route.destination != ANY_IPV4:
            problems.append(f"subnet {subnet.name!r} default route must cover {ANY_IPV4}")
        if subnet.map_public_ip_on_launch and not subnet.is_public:
            problems.append(
                f"subnet {subnet.name!r} maps public IPs but has no internet gateway route"
            )
        if subnet.is_public and not subnet.map_public_ip_on_launch:
            problems.append(f"public subnet {subnet.name!r} must map public IPs on launch")

    for i, (left, left_net) in enumerate(parsed):
        for right, right_net in parsed[i + 1:]:
            if left_net.overlaps(right_net):
                problems.append(f"subnets {left.name!r} and {right.name!r} overlap")

    if spec.nat_subnet not in seen_names:
        problems.append(f"NAT subnet {spec.nat_subnet!r} is not declared")
    elif not spec.subnet(spec.nat_subnet).is_public:
        problems.append(f"NAT subnet {spec.nat_subnet!r} must be a public subnet")

    seen_rules: set[tuple[str, int, int, str]] = set()
    for rule in spec.ingress_rules:
        if rule.protocol not in IP_PROTOCOLS:
            problems.append(f"ingress rule {rule.name!r} has unknown protocol {rule.protocol!r}")
        if not (0 <= rule.from_port <= rule.to_port <= 65535):
            problems.append(
                f"ingress rule {rule.name!r} port range {rule.from_port}-{rule.to_port} is invalid"
            )
        _parse_network(rule.cidr_ipv4, f"ingress rule {rule.name!r} source", problems)
        key = (rule.protocol, rule.from_port, rule.to_port, rule.cidr_ipv4)
        if key in seen_rules:
            problems.append(f"ingress rule {rule.name!r} duplicates another rule")
        seen_rules.add(key)

    if problems:
        raise TopologyError(problems)
    return spec
