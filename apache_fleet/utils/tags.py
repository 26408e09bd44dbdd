"""
Tag factory for AWS resources.

Provides consistent tagging for cost allocation and resource management.
"""

from apache_fleet.configs.constants import DEFAULT_TAGS


def create_tags(
    environment: str,
    resource_name: str,
    **extra_tags: str,
) -> dict[str, str]:
    """
    Create a standard tag set for an AWS resource.

    Args:
        environment: Deployment environment
        resource_name: Name of the resource
        **extra_tags: Additional tags to include

    Returns:
        Dictionary of tags
    """
    tags = {
        **DEFAULT_TAGS,
        "Environment": environment,
        "Name": resource_name,
    }
    tags.update(extra_tags)
    return tags

