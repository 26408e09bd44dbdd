"""
Stack assembly for both deployment variants.

Web fleet:
    VPC (1 public subnet) -> Security Group -> Key Pair -> Instances -> Elastic IPs

Load-balanced fleet:
    VPC (2 public subnets) -> Security Group -> Key Pair -> Instances
    -> Elastic IPs -> NLB -> Target Group -> Attachments

Each function returns the stack outputs; exporting them is left to the
program entry point.
"""

from dataclasses import dataclass
from typing import Any

import pulumi

from apache_fleet.configs.base import FleetConfig
from apache_fleet.configs.constants import LOAD_BALANCED_SUBNET_COUNT, WEB_FLEET_SUBNET_COUNT
from apache_fleet.utils.naming import ResourceNamer
from apache_fleet.components.networking.vpc import VpcComponent
from apache_fleet.components.networking.security_groups import WebSecurityGroupComponent
from apache_fleet.components.security.key_pair import KeyPairComponent
from apache_fleet.components.compute.web_servers import WebServersComponent
from apache_fleet.components.compute.nlb import NlbComponent


@dataclass
class _Foundation:
    vpc: VpcComponent
    security_group: WebSecurityGroupComponent
    key_name: pulumi.Output[str] | None


def _deploy_foundation(config: FleetConfig, subnet_count: int) -> _Foundation:
    """Networking, firewall and SSH key shared by both variants."""
    vpc = VpcComponent(
        name=config.prefix,
        environment=config.environment,
        vpc_cidr=config.vpc_cidr,
        subnet_count=subnet_count,
    )

    security_group = WebSecurityGroupComponent(
        name=config.prefix,
        environment=config.environment,
        vpc_id=vpc.vpc.id,
        ssh_cidr=config.ssh_cidr,
    )

    key_name = None
    if config.ssh_public_key:
        key_pair = KeyPairComponent(
            name=config.prefix,
            environment=config.environment,
            public_key=config.ssh_public_key,
        )
        key_name = key_pair.get_outputs().key_name
    else:
        pulumi.log.warn("ssh_public_key is not set; instances will not accept SSH logins")

    return _Foundation(vpc=vpc, security_group=security_group, key_name=key_name)


def deploy_web_fleet(config: FleetConfig) -> dict[str, Any]:
    """
    Deploy Apache instances with one Elastic IP each.

    Args:
        config: Validated fleet configuration

    Returns:
        Stack outputs: vpc_id and instance_public_ips (name -> IP)
    """
    namer = ResourceNamer(prefix=config.prefix)
    foundation = _deploy_foundation(config, WEB_FLEET_SUBNET_COUNT)
    vpc_outputs = foundation.vpc.get_outputs()

    web_servers = WebServersComponent(
        name=namer.name("web"),
        environment=config.environment,
        instance_names=namer.instance_names(config.instance_count),
        instance_type=config.instance_type,
        subnet_ids=vpc_outputs.public_subnet_ids,
        security_group_id=foundation.security_group.get_outputs().web_sg_id,
        key_name=foundation.key_name,
        assign_elastic_ips=True,
        internet_gateway=foundation.vpc.igw,
    )

    return {
        "vpc_id": vpc_outputs.vpc_id,
        "instance_public_ips": web_servers.get_outputs().public_ips,
    }


def deploy_load_balanced_fleet(config: FleetConfig) -> dict[str, Any]:
    """
    Deploy Apache instances behind a Network Load Balancer with two static IPs.

    Args:
        config: Validated fleet configuration

    Returns:
        Stack outputs: vpc_id, nlb_dns_name, nlb_public_ips and instance_ids
    """
    namer = ResourceNamer(prefix=config.prefix)
    foundation = _deploy_foundation(config, LOAD_BALANCED_SUBNET_COUNT)
    vpc_outputs = foundation.vpc.get_outputs()

    web_servers = WebServersComponent(
        name=namer.name("web"),
        environment=config.environment,
        instance_names=namer.instance_names(config.instance_count),
        instance_type=config.instance_type,
        subnet_ids=vpc_outputs.public_subnet_ids,
        security_group_id=foundation.security_group.get_outputs().web_sg_id,
        key_name=foundation.key_name,
        assign_elastic_ips=False,
    )
    web_outputs = web_servers.get_outputs()

    nlb = NlbComponent(
        name=config.prefix,
        environment=config.environment,
        vpc_id=vpc_outputs.vpc_id,
        subnet_ids=vpc_outputs.public_subnet_ids,
        instance_ids=web_outputs.instance_ids,
        internet_gateway=foundation.vpc.igw,
    )
    nlb_outputs = nlb.get_outputs()

    return {
        "vpc_id": vpc_outputs.vpc_id,
        "nlb_dns_name": nlb_outputs.nlb_dns_name,
        "nlb_public_ips": pulumi.Output.all(*nlb_outputs.public_ips),
        "instance_ids": pulumi.Output.all(**web_outputs.instance_ids),
    }


def deploy(config: FleetConfig) -> dict[str, Any]:
    """Deploy the variant selected by ``config.load_balanced``."""
    if config.load_balanced:
        return deploy_load_balanced_fleet(config)
    return deploy_web_fleet(config)
