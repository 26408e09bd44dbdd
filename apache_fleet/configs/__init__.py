"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from apache_fleet.configs.base import FleetConfig, public_subnet_cidrs
from apache_fleet.configs.environment import get_config
from apache_fleet.configs.constants import (
    VPC_CIDR,
    PORTS,
    DEFAULT_TAGS,
    DEFAULT_INSTANCE_TYPE,
)

__all__ = [
    "FleetConfig",
    "get_config",
    "public_subnet_cidrs",
    "VPC_CIDR",
    "PORTS",
    "DEFAULT_TAGS",
    "DEFAULT_INSTANCE_TYPE",
]
