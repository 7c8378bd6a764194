"""
Stack configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import re

import pulumi

from vpc_lab.configs.base import LabConfig
from vpc_lab.configs.constants import (
    DEFAULT_IMAGE_ID,
    DEFAULT_INSTANCE_TYPE,
    DEFAULT_WELCOME_MESSAGE,
)

_IMAGE_ID_PATTERN = re.compile(r"^ami-[0-9a-f]{8,17}$")


def get_config() -> LabConfig:
    """
    Load lab configuration from Pulumi stack config.

    Returns:
        LabConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If key_name is not set
        ValueError: If key_name is blank or image_id is not an AMI ID
    """
    config = pulumi.Config()

    key_name = config.require("key_name").strip()
    if not key_name:
        raise ValueError("key_name must name an existing EC2 key pair")

    image_id = config.get("image_id") or DEFAULT_IMAGE_ID
    if not _IMAGE_ID_PATTERN.match(image_id):
        raise ValueError(f"image_id {image_id!r} is not a valid AMI ID")

    return LabConfig(
        environment=config.get("environment") or "dev",
        key_name=key_name,
        image_id=image_id,
        instance_type=config.get("instance_type") or DEFAULT_INSTANCE_TYPE,
        welcome_message=config.get("welcome_message") or DEFAULT_WELCOME_MESSAGE,
        outputs_env_file=config.get("outputs_env_file"),
    )
