"""
Base configuration dataclass for the lab stack.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

from dataclasses import dataclass

from vpc_lab.configs.constants import DEFAULT_IMAGE_ID


@dataclass(frozen=True)
class LabConfig:
    """
    Stack configuration for the lab deployment.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        key_name: Name of an existing EC2 key pair for SSH access
        image_id: AMI ID used for both instances
        instance_type: EC2 instance type for both instances
        welcome_message: Heading written to the web server index page
        outputs_env_file: Optional path to write stack outputs as a .env file
    """
    environment: str
    key_name: str
    image_id: str
    instance_type: str
    welcome_message: str
    outputs_env_file: str | None = None

    @property
    def uses_default_image(self) -> bool:
        """Check whether the built-in, region-specific AMI is in use."""
        return self.image_id == DEFAULT_IMAGE_ID
