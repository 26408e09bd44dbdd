"""
Compute components for the web tier.

Components:
- WebServersComponent: EC2 instances running Apache, optional Elastic IPs
- NlbComponent: Network Load Balancer with static IPs in front of the fleet
"""

from apache_fleet.components.compute.web_servers import (
    WebServersComponent,
    WebServersOutputs,
    apache_user_data,
)
from apache_fleet.components.compute.nlb import NlbComponent, NlbOutputs

__all__ = [
    "WebServersComponent",
    "WebServersOutputs",
    "apache_user_data",
    "NlbComponent",
    "NlbOutputs",
]
