"""
Web Server Fleet Component running Apache on EC2.

Key Components:
1. AMI: latest Amazon Linux 2023 (x86_64), looked up once per fleet.
2. User Data: installs httpd at first boot, writes an index page naming the
   instance and starts the service. Changing it replaces the instance.
3. Placement: instances are assigned to the given subnets round-robin, so a
   two-subnet VPC gets an even spread across both zones.
4. Storage: small gp3 root volume, encrypted at rest.
5. IMDSv2 (http_tokens="required") on every instance.
6. Elastic IPs (optional): one static address per instance. The web fleet
   variant publishes these; behind an NLB the instances keep their
   auto-assigned public IPs instead.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from apache_fleet.configs.constants import AMI_NAME_FILTER, AMI_OWNERS, ROOT_VOLUME_SIZE_GB
from apache_fleet.utils.tags import create_tags


@dataclass
class WebServersOutputs:
    """Output values from web servers component."""
    instance_ids: dict[str, pulumi.Output[str]]
    public_ips: pulumi.Output[dict[str, str]]


def apache_user_data(instance_name: str) -> str:
    """
    Build the first-boot script for an Apache instance.

    Args:
        instance_name: Name rendered into the served index page

    Returns:
        Bash script suitable for EC2 user data
    """
    return f"""#!/bin/bash
set -euxo pipefail

dnf install -y httpd

cat > /var/www/html/index.html << 'EOF'
<html>
  <body>
    <h1>Hello from {instance_name}</h1>
  </body>
</html>
EOF

systemctl enable --now httpd
"""


class WebServersComponent(pulumi.ComponentResource):
    """
    Fleet of identical Apache web servers.

    One instance is created per entry of ``instance_names``; the names are
    used for resource names, the Name tag and the served page.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        instance_names: list[str],
        instance_type: str,
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        key_name: pulumi.Input[str] | None = None,
        assign_elastic_ips: bool = False,
        internet_gateway: pulumi.Resource | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        if not instance_names:
            raise ValueError("at least one instance name is required")
        if not subnet_ids:
            raise ValueError("at least one subnet is required")

        super().__init__("apache-fleet:compute:WebServers", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        ami = aws.ec2.get_ami(
            most_recent=True,
            owners=AMI_OWNERS,
            filters=[
                aws.ec2.GetAmiFilterArgs(
                    name="name",
                    values=[AMI_NAME_FILTER],
                ),
                aws.ec2.GetAmiFilterArgs(
                    name="virtualization-type",
                    values=["hvm"],
                ),
            ],
        )

        self.instances: dict[str, aws.ec2.Instance] = {}
        for index, instance_name in enumerate(instance_names):
            self.instances[instance_name] = aws.ec2.Instance(
                instance_name,
                ami=ami.id,
                instance_type=instance_type,
                subnet_id=subnet_ids[index % len(subnet_ids)],
                vpc_security_group_ids=[security_group_id],
                key_name=key_name,
                user_data=apache_user_data(instance_name),
                user_data_replace_on_change=True,
                root_block_device=aws.ec2.InstanceRootBlockDeviceArgs(
                    volume_size=ROOT_VOLUME_SIZE_GB,
                    volume_type="gp3",
                    encrypted=True,
                ),
                metadata_options=aws.ec2.InstanceMetadataOptionsArgs(
                    http_tokens="required",  # IMDSv2
                    http_endpoint="enabled",
                ),
                tags=create_tags(environment, instance_name, Role="web"),
                opts=child_opts,
            )

        # EIP association needs the IGW attached to the VPC first
        eip_opts = pulumi.ResourceOptions(
            parent=self,
            depends_on=[internet_gateway] if internet_gateway else None,
        )
        self.elastic_ips: dict[str, aws.ec2.Eip] = {}
        if assign_elastic_ips:
            for instance_name, instance in self.instances.items():
                self.elastic_ips[instance_name] = aws.ec2.Eip(
                    f"{instance_name}-eip",
                    domain="vpc",
                    instance=instance.id,
                    tags=create_tags(environment, f"{instance_name}-eip"),
                    opts=eip_opts,
                )

        self.public_ips = self._collect_public_ips()

        self.register_outputs({
            "instance_ids": {n: i.id for n, i in self.instances.items()},
            "public_ips": self.public_ips,
        })

    def _collect_public_ips(self) -> pulumi.Output[dict[str, str]]:
        """Map instance name to its Elastic IP, or its launch-time public IP."""
        names = list(self.instances)
        if self.elastic_ips:
            addresses = [self.elastic_ips[n].public_ip for n in names]
        else:
            addresses = [self.instances[n].public_ip for n in names]
        return pulumi.Output.all(*addresses).apply(lambda ips: dict(zip(names, ips)))

    def get_outputs(self) -> WebServersOutputs:
        """Get web server output values."""
        return WebServersOutputs(
            instance_ids={n: i.id for n, i in self.instances.items()},
            public_ips=self.public_ips,
        )
