"""
Pulumi program entry point for the secure VPC lab.

Loads stack configuration, declares the lab resources and exports:
- public_instance_id: Web server instance ID
- private_instance_id: Private instance ID
- public_url: http://<web server public IP>
"""

import pulumi

from vpc_lab.configs.environment import get_config
from vpc_lab.lab import deploy_lab
from vpc_lab.utils.outputs import write_outputs_to_env


def main() -> None:
    """Deploy the secure VPC lab."""
    # Load configuration
    config = get_config()

    if config.uses_default_image:
        pulumi.log.warn(
            f"Using default image {config.image_id}; AMI IDs are region-specific "
            "and this one may be stale. Set image_id in the stack config."
        )

    outputs = deploy_lab(config)

    # Write outputs to .env file for local tooling
    if config.outputs_env_file:
        write_outputs_to_env(outputs, config.outputs_env_file)

    # Export to Pulumi stack
    for key, value in outputs.items():
        pulumi.export(key, value)

    pulumi.log.info(f"✓ Lab declared for environment '{config.environment}'")


# Execute
main()
