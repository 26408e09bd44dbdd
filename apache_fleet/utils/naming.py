"""
Resource naming conventions for consistent AWS resource names.

Follows pattern: {prefix}-{resource}
"""

from dataclasses import dataclass


@dataclass
class ResourceNamer:
    """
    Generates consistent resource names for AWS resources.

    Attributes:
        prefix: Prefix shared by every resource in the stack
    """
    prefix: str

    def name(self, resource: str) -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'vpc', 'web-sg')

        Returns:
            Formatted resource name
        """
        return f"{self.prefix}-{resource}"

    def instance_names(self, count: int) -> list[str]:
        """
        Generate the names of the web server instances.

        Args:
            count: Number of instances in the fleet

        Returns:
            Names numbered from 1, e.g. ['demo-web-1', 'demo-web-2']
        """
        return [self.name(f"web-{index}") for index in range(1, count + 1)]
