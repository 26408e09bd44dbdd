"""
Security Group Component for the web servers.

Rules:
- Ingress SSH (22) from the configured admin CIDR.
- Ingress HTTP (80) from anywhere. This also covers the NLB: it preserves
  client source addresses and its health checks originate inside the VPC.
- Egress: everything, so instances can install packages at boot.

Security groups are stateful; replies to allowed inbound traffic are
always permitted.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from apache_fleet.configs.constants import ANYWHERE_CIDR, PORTS
from apache_fleet.utils.tags import create_tags


@dataclass
class SecurityGroupOutputs:
    """Output values from security group component."""
    web_sg_id: pulumi.Output[str]


class WebSecurityGroupComponent(pulumi.ComponentResource):
    """Security group shared by every Apache instance."""

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_id: pulumi.Input[str],
        ssh_cidr: str = ANYWHERE_CIDR,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("apache-fleet:networking:WebSecurityGroup", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.web_sg = aws.ec2.SecurityGroup(
            f"{name}-web-sg",
            description="Allow SSH and HTTP to Apache web servers",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-web-sg"),
            opts=child_opts,
        )

        self.ssh_ingress = aws.vpc.SecurityGroupIngressRule(
            f"{name}-web-ingress-ssh",
            security_group_id=self.web_sg.id,
            ip_protocol="tcp",
            from_port=PORTS["ssh"],
            to_port=PORTS["ssh"],
            cidr_ipv4=ssh_cidr,
            description="SSH from admin range",
            opts=child_opts,
        )

        self.http_ingress = aws.vpc.SecurityGroupIngressRule(
            f"{name}-web-ingress-http",
            security_group_id=self.web_sg.id,
            ip_protocol="tcp",
            from_port=PORTS["http"],
            to_port=PORTS["http"],
            cidr_ipv4=ANYWHERE_CIDR,
            description="HTTP from anywhere",
            opts=child_opts,
        )

        self.egress_all = aws.vpc.SecurityGroupEgressRule(
            f"{name}-web-egress-all",
            security_group_id=self.web_sg.id,
            ip_protocol="-1",
            cidr_ipv4=ANYWHERE_CIDR,
            description="All outbound traffic",
            opts=child_opts,
        )

        self.register_outputs({
            "web_sg_id": self.web_sg.id,
        })

    def get_outputs(self) -> SecurityGroupOutputs:
        """Get security group output values."""
        return SecurityGroupOutputs(web_sg_id=self.web_sg.id)
