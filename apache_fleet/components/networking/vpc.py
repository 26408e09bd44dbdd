"""
VPC Component Resource for the public web tier.

Steps & Architecture:
1. VPC: isolated network container with DNS support and hostnames enabled
   so instances get resolvable public DNS names.
2. Internet Gateway (IGW): the VPC's path to and from the internet.
3. Public Subnets: one /24 per availability zone, carved from the start of
   the VPC range. Instances launched here receive a public IP.
   - Web fleet: 1 subnet.
   - Load-balanced fleet: 2 subnets in different AZs (an internet-facing
     NLB needs at least two zones to be useful).
4. Public Route Table: 0.0.0.0/0 -> IGW, shared by every public subnet.
5. Associations: one per subnet, binding it to the public route table.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from apache_fleet.configs.base import public_subnet_cidrs
from apache_fleet.configs.constants import ANYWHERE_CIDR
from apache_fleet.utils.tags import create_tags


@dataclass
class VpcOutputs:
    """Output values from VPC component."""
    vpc_id: pulumi.Output[str]
    public_subnet_ids: list[pulumi.Output[str]]
    internet_gateway_id: pulumi.Output[str]
    public_route_table_id: pulumi.Output[str]


class VpcComponent(pulumi.ComponentResource):
    """
    VPC with public subnets routed through an internet gateway.

    Subnets are spread across the first ``subnet_count`` available zones
    of the provider's region.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_cidr: str,
        subnet_count: int,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        zones = aws.get_availability_zones(state="available").names
        if len(zones) < subnet_count:
            raise ValueError(
                f"{subnet_count} availability zones required, region only has {len(zones)}"
            )

        super().__init__("apache-fleet:networking:Vpc", name, None, opts)
        self.environment = environment

        child_opts = pulumi.ResourceOptions(parent=self)

        self.vpc = aws.ec2.Vpc(
            f"{name}-vpc",
            cidr_block=vpc_cidr,
            enable_dns_hostnames=True,
            enable_dns_support=True,
            tags=create_tags(environment, f"{name}-vpc"),
            opts=child_opts,
        )

        self.igw = aws.ec2.InternetGateway(
            f"{name}-igw",
            vpc_id=self.vpc.id,
            tags=create_tags(environment, f"{name}-igw"),
            opts=child_opts,
        )

        self.public_subnets: list[aws.ec2.Subnet] = []
        cidrs = public_subnet_cidrs(vpc_cidr, subnet_count)
        for index, (cidr, zone) in enumerate(zip(cidrs, zones), start=1):
            subnet_name = f"{name}-public-subnet-{index}"
            self.public_subnets.append(
                aws.ec2.Subnet(
                    subnet_name,
                    vpc_id=self.vpc.id,
                    cidr_block=cidr,
                    availability_zone=zone,
                    map_public_ip_on_launch=True,
                    tags=create_tags(environment, subnet_name, Tier="public"),
                    opts=child_opts,
                )
            )

        self._create_route_table(name, child_opts)

        self.register_outputs({
            "vpc_id": self.vpc.id,
            "public_subnet_ids": [subnet.id for subnet in self.public_subnets],
            "internet_gateway_id": self.igw.id,
            "public_route_table_id": self.public_rt.id,
        })

    def _create_route_table(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create the public route table and associate every public subnet."""
        self.public_rt = aws.ec2.RouteTable(
            f"{name}-public-rt",
            vpc_id=self.vpc.id,
            routes=[
                aws.ec2.RouteTableRouteArgs(
                    cidr_block=ANYWHERE_CIDR,
                    gateway_id=self.igw.id,
                ),
            ],
            tags=create_tags(self.environment, f"{name}-public-rt"),
            opts=opts,
        )

        self.route_table_associations = [
            aws.ec2.RouteTableAssociation(
                f"{name}-public-rt-assoc-{index}",
                subnet_id=subnet.id,
                route_table_id=self.public_rt.id,
                opts=opts,
            )
            for index, subnet in enumerate(self.public_subnets, start=1)
        ]

    def get_outputs(self) -> VpcOutputs:
        """Get VPC output values."""
        return VpcOutputs(
            vpc_id=self.vpc.id,
            public_subnet_ids=[subnet.id for subnet in self.public_subnets],
            internet_gateway_id=self.igw.id,
            public_route_table_id=self.public_rt.id,
        )
