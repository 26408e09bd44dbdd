"""
Security components.

Components:
- KeyPairComponent: EC2 key pair for SSH access to the web servers
"""

from apache_fleet.components.security.key_pair import KeyPairComponent, KeyPairOutputs

__all__ = [
    "KeyPairComponent",
    "KeyPairOutputs",
]
