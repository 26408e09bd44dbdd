"""
Utility functions for Pulumi infrastructure.

Provides naming conventions, tag factories, and output utilities.
"""

from apache_fleet.utils.naming import ResourceNamer
from apache_fleet.utils.tags import create_tags
from apache_fleet.utils.outputs import render_env, write_outputs_to_env

__all__ = [
    "ResourceNamer",
    "create_tags",
    "render_env",
    "write_outputs_to_env",
]
