"""Pytest fixtures for infrastructure tests."""

import itertools
from pathlib import Path

import pulumi
import pytest

from apache_fleet.configs.base import FleetConfig


class FleetMocks(pulumi.runtime.Mocks):
    """Mock engine returning inputs as outputs plus provider-computed fields."""

    def __init__(self) -> None:
        self._addresses = itertools.count(10)

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        outputs = dict(args.inputs)

        if args.typ == "aws:ec2/eip:Eip":
            outputs["publicIp"] = f"203.0.113.{next(self._addresses)}"
            outputs["allocationId"] = f"eipalloc-{args.name}"
        elif args.typ == "aws:ec2/instance:Instance":
            outputs["publicIp"] = f"198.51.100.{next(self._addresses)}"
        elif args.typ == "aws:lb/loadBalancer:LoadBalancer":
            outputs["arn"] = f"arn:aws:elasticloadbalancing:us-east-1:123456789012:loadbalancer/net/{args.name}"
            outputs["dnsName"] = f"{args.name}.elb.us-east-1.amazonaws.com"
        elif args.typ == "aws:lb/targetGroup:TargetGroup":
            outputs["arn"] = f"arn:aws:elasticloadbalancing:us-east-1:123456789012:targetgroup/{args.name}"
        elif args.typ == "aws:ec2/keyPair:KeyPair":
            outputs["fingerprint"] = "d7:ff:a6:63:18:64:9c:57:a1:ee:ca:a4:ad:c2:81:62"

        return [f"{args.name}_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        if args.token == "aws:ec2/getAmi:getAmi":
            return {"id": "ami-0123456789abcdef0", "architecture": "x86_64"}
        if args.token == "aws:index/getAvailabilityZones:getAvailabilityZones":
            return {
                "names": ["us-east-1a", "us-east-1b", "us-east-1c"],
                "zoneIds": ["use1-az1", "use1-az2", "use1-az4"],
            }
        return {}


pulumi.runtime.set_mocks(FleetMocks(), project="apache-fleet", stack="test", preview=False)


@pytest.fixture
def package_root():
    """Return the apache_fleet package directory."""
    return Path(__file__).parent.parent.parent / "apache_fleet"


@pytest.fixture
def python_files_in_package(package_root):
    """Return all Python files in the package."""
    return [f for f in package_root.rglob("*.py") if "__pycache__" not in str(f)]


@pytest.fixture
def make_config():
    """Build a FleetConfig with test defaults, overridable per field."""

    def _make(**overrides) -> FleetConfig:
        values = {
            "prefix": "test",
            "instance_count": 2,
            "load_balanced": False,
            "environment": "dev",
            "instance_type": "t3.micro",
            "ssh_public_key": "ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIExample test@example",
            "ssh_cidr": "0.0.0.0/0",
            "vpc_cidr": "10.0.0.0/16",
        }
        values.update(overrides)
        return FleetConfig(**values)

    return _make
