"""
Base configuration dataclass for fleet settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

import ipaddress
import re
from dataclasses import dataclass

from apache_fleet.configs.constants import (
    LB_NAME_MAX_LENGTH,
    LOAD_BALANCED_SUBNET_COUNT,
    SUBNET_PREFIX_LENGTH,
    VPC_MAX_PREFIX_LENGTH,
    VPC_MIN_PREFIX_LENGTH,
)

_PREFIX_PATTERN = re.compile(r"^[a-z0-9]([a-z0-9-]*[a-z0-9])?$")

# Longest suffix appended to the prefix for a load balancer scoped name ("-nlb")
_LB_SUFFIX_LENGTH = len("-nlb")


@dataclass(frozen=True)
class FleetConfig:
    """
    Fleet configuration for infrastructure deployment.

    Attributes:
        prefix: Prefix interpolated into every resource name
        instance_count: Number of Apache instances to launch
        load_balanced: Deploy behind a Network Load Balancer with static IPs
        environment: Deployment environment used for tagging
        instance_type: EC2 instance type for the web servers
        ssh_public_key: OpenSSH public key material, or None to skip the key pair
        ssh_cidr: Source CIDR allowed to reach port 22
        vpc_cidr: CIDR block of the VPC

    Raises:
        ValueError: If any value is outside what AWS or the layout accepts
    """
    prefix: str
    instance_count: int
    load_balanced: bool
    environment: str
    instance_type: str
    ssh_public_key: str | None
    ssh_cidr: str
    vpc_cidr: str

    def __post_init__(self) -> None:
        if self.instance_count < 1:
            raise ValueError(
                f"instance_count must be at least 1, got {self.instance_count}"
            )

        if not _PREFIX_PATTERN.match(self.prefix):
            raise ValueError(
                f"prefix {self.prefix!r} must be lowercase alphanumerics and hyphens, "
                "and must not start or end with a hyphen"
            )

        if len(self.prefix) + _LB_SUFFIX_LENGTH > LB_NAME_MAX_LENGTH:
            raise ValueError(
                f"prefix {self.prefix!r} is too long; at most "
                f"{LB_NAME_MAX_LENGTH - _LB_SUFFIX_LENGTH} characters are allowed"
            )

        ssh_network = _parse_cidr("ssh_cidr", self.ssh_cidr)
        vpc_network = _parse_cidr("vpc_cidr", self.vpc_cidr)

        if vpc_network.prefixlen < VPC_MIN_PREFIX_LENGTH:
            raise ValueError(
                f"vpc_cidr {self.vpc_cidr!r} is too large; AWS accepts VPC blocks "
                f"from /{VPC_MIN_PREFIX_LENGTH} to /{VPC_MAX_PREFIX_LENGTH}"
            )

        max_subnets = 2 ** max(SUBNET_PREFIX_LENGTH - vpc_network.prefixlen, 0)
        if max_subnets < LOAD_BALANCED_SUBNET_COUNT:
            raise ValueError(
                f"vpc_cidr {self.vpc_cidr!r} must hold at least "
                f"{LOAD_BALANCED_SUBNET_COUNT} /{SUBNET_PREFIX_LENGTH} subnets"
            )

        # Store canonical CIDR notation, the form security group rules and VPCs accept
        object.__setattr__(self, "ssh_cidr", str(ssh_network))
        object.__setattr__(self, "vpc_cidr", str(vpc_network))

    @property
    def variant(self) -> str:
        """Human readable name of the selected deployment variant."""
        return "load-balanced" if self.load_balanced else "web"


def public_subnet_cidrs(vpc_cidr: str, count: int) -> list[str]:
    """
    Carve the first ``count`` /24 blocks out of the VPC range.

    Args:
        vpc_cidr: VPC CIDR block (e.g. '10.0.0.0/16')
        count: Number of subnet blocks to return

    Returns:
        List of subnet CIDR strings in address order

    Raises:
        ValueError: If the VPC cannot hold ``count`` subnets
    """
    network = ipaddress.IPv4Network(vpc_cidr)
    blocks = []
    for subnet in network.subnets(new_prefix=SUBNET_PREFIX_LENGTH):
        if len(blocks) == count:
            break
        blocks.append(str(subnet))

    if len(blocks) < count:
        raise ValueError(f"{vpc_cidr} cannot hold {count} /{SUBNET_PREFIX_LENGTH} subnets")
    return blocks


def _parse_cidr(field: str, value: str) -> ipaddress.IPv4Network:
    """Parse an IPv4 block given in explicit CIDR notation (address/prefix)."""
    if "/" not in value:
        raise ValueError(f"{field} {value!r} must be in CIDR notation, e.g. '{value}/32'")
    try:
        return ipaddress.IPv4Network(value)
    except ValueError as e:
        raise ValueError(f"{field} {value!r} is not a valid IPv4 CIDR") from e
