"""
Key Pair Component for SSH access to the web servers.

Registers an existing OpenSSH public key with EC2. The private key never
leaves the operator's machine; Pulumi only ever sees the public half.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from apache_fleet.utils.tags import create_tags


@dataclass
class KeyPairOutputs:
    """Output values from key pair component."""
    key_name: pulumi.Output[str]
    fingerprint: pulumi.Output[str]


class KeyPairComponent(pulumi.ComponentResource):
    """EC2 key pair imported from a public key."""

    def __init__(
        self,
        name: str,
        environment: str,
        public_key: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        if not public_key.strip():
            raise ValueError("public_key must not be empty")

        super().__init__("apache-fleet:security:KeyPair", name, None, opts)

        self.key_pair = aws.ec2.KeyPair(
            f"{name}-key",
            key_name=f"{name}-key",
            public_key=public_key.strip(),
            tags=create_tags(environment, f"{name}-key"),
            opts=pulumi.ResourceOptions(parent=self),
        )

        self.register_outputs({
            "key_name": self.key_pair.key_name,
            "fingerprint": self.key_pair.fingerprint,
        })

    def get_outputs(self) -> KeyPairOutputs:
        """Get key pair output values."""
        return KeyPairOutputs(
            key_name=self.key_pair.key_name,
            fingerprint=self.key_pair.fingerprint,
        )
