"""
Utility functions for the lab Pulumi program.

Provides naming conventions, tag factories, and output utilities.
"""

from vpc_lab.utils.naming import ResourceNamer
from vpc_lab.utils.tags import create_tags
from vpc_lab.utils.outputs import public_url, write_outputs_to_env

__all__ = [
    "ResourceNamer",
    "create_tags",
    "public_url",
    "write_outputs_to_env",
]
