"""
Pulumi infrastructure-as-code for a fleet of Apache web servers on AWS.

This package defines AWS infrastructure including:
- VPC with public subnets, internet gateway and routing
- Security group allowing SSH and HTTP
- SSH key pair
- EC2 instances running Apache, each with an Elastic IP
- Optionally, a Network Load Balancer with two static Elastic IPs
"""
