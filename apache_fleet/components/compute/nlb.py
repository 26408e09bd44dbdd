"""
Network Load Balancer component with static public addresses.

Creates:
- Two Elastic IPs, one per public subnet
- Internet-facing NLB pinned to those addresses through subnet mappings
- Target group for the web servers (TCP 80, HTTP health check on /)
- TCP listener on port 80
- One target group attachment per instance

NLB doesn't use security groups here; it operates at Layer 4 and preserves
client source IPs, so the instances' own security group does the filtering.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from apache_fleet.configs.constants import PORTS
from apache_fleet.utils.tags import create_tags


@dataclass
class NlbOutputs:
    """Output values from NLB component."""
    nlb_arn: pulumi.Output[str]
    nlb_dns_name: pulumi.Output[str]
    listener_arn: pulumi.Output[str]
    target_group_arn: pulumi.Output[str]
    public_ips: list[pulumi.Output[str]]


class NlbComponent(pulumi.ComponentResource):
    """
    Internet-facing Network Load Balancer in front of the Apache fleet.

    ``name`` is also used for the AWS-side load balancer and target group
    names, so it must leave room for the "-nlb" suffix within 32 characters.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_id: pulumi.Input[str],
        subnet_ids: list[pulumi.Input[str]],
        instance_ids: dict[str, pulumi.Input[str]],
        internet_gateway: pulumi.Resource | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        if len(subnet_ids) < 2:
            raise ValueError("an internet-facing NLB needs subnets in at least two zones")

        super().__init__("apache-fleet:compute:Nlb", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # Static addresses: one Elastic IP per subnet mapping
        self.elastic_ips = [
            aws.ec2.Eip(
                f"{name}-nlb-eip-{index}",
                domain="vpc",
                tags=create_tags(environment, f"{name}-nlb-eip-{index}"),
                opts=pulumi.ResourceOptions(
                    parent=self,
                    depends_on=[internet_gateway] if internet_gateway else None,
                ),
            )
            for index in range(1, len(subnet_ids) + 1)
        ]

        self.nlb = aws.lb.LoadBalancer(
            f"{name}-nlb",
            name=f"{name}-nlb",
            internal=False,
            load_balancer_type="network",
            subnet_mappings=[
                aws.lb.LoadBalancerSubnetMappingArgs(
                    subnet_id=subnet_id,
                    allocation_id=eip.allocation_id,
                )
                for subnet_id, eip in zip(subnet_ids, self.elastic_ips)
            ],
            enable_deletion_protection=False,
            enable_cross_zone_load_balancing=True,
            tags=create_tags(environment, f"{name}-nlb"),
            opts=child_opts,
        )

        self.target_group = aws.lb.TargetGroup(
            f"{name}-tg",
            name=f"{name}-tg",
            port=PORTS["http"],
            protocol="TCP",
            vpc_id=vpc_id,
            target_type="instance",
            deregistration_delay=30,
            health_check=aws.lb.TargetGroupHealthCheckArgs(
                enabled=True,
                port="traffic-port",
                protocol="HTTP",
                path="/",
                healthy_threshold=3,
                unhealthy_threshold=3,
                interval=30,
                timeout=10,
                matcher="200-399",
            ),
            tags=create_tags(environment, f"{name}-tg"),
            opts=child_opts,
        )

        self.listener = aws.lb.Listener(
            f"{name}-nlb-listener",
            load_balancer_arn=self.nlb.arn,
            port=PORTS["http"],
            protocol="TCP",
            default_actions=[
                aws.lb.ListenerDefaultActionArgs(
                    type="forward",
                    target_group_arn=self.target_group.arn,
                ),
            ],
            tags=create_tags(environment, f"{name}-nlb-listener"),
            opts=child_opts,
        )

        self.attachments = [
            aws.lb.TargetGroupAttachment(
                f"{instance_name}-tg-attachment",
                target_group_arn=self.target_group.arn,
                target_id=instance_id,
                port=PORTS["http"],
                opts=child_opts,
            )
            for instance_name, instance_id in instance_ids.items()
        ]

        self.register_outputs({
            "nlb_arn": self.nlb.arn,
            "nlb_dns_name": self.nlb.dns_name,
            "listener_arn": self.listener.arn,
            "target_group_arn": self.target_group.arn,
            "public_ips": [eip.public_ip for eip in self.elastic_ips],
        })

    def get_outputs(self) -> NlbOutputs:
        """Get NLB output values."""
        return NlbOutputs(
            nlb_arn=self.nlb.arn,
            nlb_dns_name=self.nlb.dns_name,
            listener_arn=self.listener.arn,
            target_group_arn=self.target_group.arn,
            public_ips=[eip.public_ip for eip in self.elastic_ips],
        )
