"""
Infrastructure constants for the Apache fleet.

Contains CIDR defaults, ports, AMI lookup filters and default tags.
"""

from typing import Final

# VPC Configuration
VPC_CIDR: Final[str] = "10.0.0.0/16"

# Public subnets are carved as /24 blocks from the VPC range
SUBNET_PREFIX_LENGTH: Final[int] = 24

# AWS accepts VPC CIDR blocks between /16 and /28
VPC_MIN_PREFIX_LENGTH: Final[int] = 16
VPC_MAX_PREFIX_LENGTH: Final[int] = 28

# Web fleet uses one public subnet, the NLB variant spreads across two AZs
WEB_FLEET_SUBNET_COUNT: Final[int] = 1
LOAD_BALANCED_SUBNET_COUNT: Final[int] = 2

# Instance defaults
DEFAULT_INSTANCE_TYPE: Final[str] = "t3.micro"
DEFAULT_INSTANCE_COUNT: Final[int] = 2
ROOT_VOLUME_SIZE_GB: Final[int] = 8

# Anywhere (IPv4)
ANYWHERE_CIDR: Final[str] = "0.0.0.0/0"

# Port configurations
PORTS: Final[dict[str, int]] = {
    "ssh": 22,
    "http": 80,
}

# Amazon Linux 2023 (standard x86_64 image, ships httpd in its repos)
AMI_OWNERS: Final[list[str]] = ["amazon"]
AMI_NAME_FILTER: Final[str] = "al2023-ami-2023.*-x86_64"

# AWS caps load balancer and target group names at 32 characters
LB_NAME_MAX_LENGTH: Final[int] = 32

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": "apache-fleet",
    "ManagedBy": "pulumi",
}
