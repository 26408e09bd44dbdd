"""
Pulumi program entry point for the Apache fleet.

Instantiates component resources in dependency order:
1. Configuration
2. VPC -> Security Group -> Key Pair
3. Web servers (with Elastic IPs, or behind the NLB)
4. Network Load Balancer (load-balanced variant only)
"""

import pulumi

from apache_fleet.configs.environment import get_config
from apache_fleet.program import deploy
from apache_fleet.utils.outputs import write_outputs_to_env


def main() -> None:
    """Deploy the Apache fleet."""
    config = get_config()

    pulumi.log.info(
        f"Deploying {config.variant} fleet '{config.prefix}' "
        f"with {config.instance_count} instance(s)"
    )

    outputs = deploy(config)

    # Write outputs to .env file for local tooling
    write_outputs_to_env(outputs, "infrastructure.env")

    # Export to Pulumi stack
    for key, value in outputs.items():
        pulumi.export(key, value)


# Execute
main()
