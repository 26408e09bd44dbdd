"""
Fleet configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import pulumi

from apache_fleet.configs.base import FleetConfig
from apache_fleet.configs.constants import (
    ANYWHERE_CIDR,
    DEFAULT_INSTANCE_COUNT,
    DEFAULT_INSTANCE_TYPE,
    VPC_CIDR,
)


def get_config(config: pulumi.Config | None = None) -> FleetConfig:
    """
    Load fleet configuration from Pulumi stack config.

    Args:
        config: Config namespace to read from (defaults to the project namespace)

    Returns:
        FleetConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
        ValueError: If a value fails validation
    """
    config = config or pulumi.Config()

    instance_count = config.get_int("instance_count")

    return FleetConfig(
        prefix=config.require("prefix"),
        instance_count=DEFAULT_INSTANCE_COUNT if instance_count is None else instance_count,
        load_balanced=config.get_bool("load_balanced") or False,
        environment=config.get("environment") or "dev",
        instance_type=config.get("instance_type") or DEFAULT_INSTANCE_TYPE,
        ssh_public_key=config.get("ssh_public_key"),
        ssh_cidr=config.get("ssh_cidr") or ANYWHERE_CIDR,
        vpc_cidr=config.get("vpc_cidr") or VPC_CIDR,
    )
