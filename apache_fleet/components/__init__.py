"""
Pulumi component resources for the Apache fleet.

Each submodule provides reusable ComponentResource classes:
- networking: VPC, public subnets, routing, security group
- security: SSH key pair
- compute: Apache web servers, Network Load Balancer
"""
