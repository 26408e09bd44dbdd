"""
Networking components for VPC infrastructure.

Components:
- VpcComponent: VPC with public subnets, internet gateway, route table
- WebSecurityGroupComponent: Security group for the Apache instances
"""

from apache_fleet.components.networking.vpc import VpcComponent, VpcOutputs
from apache_fleet.components.networking.security_groups import (
    WebSecurityGroupComponent,
    SecurityGroupOutputs,
)

__all__ = [
    "VpcComponent",
    "VpcOutputs",
    "WebSecurityGroupComponent",
    "SecurityGroupOutputs",
]
