"""
Resource naming conventions for consistent AWS resource names.

Follows pattern: {project}-{environment}-{resource}
"""

from dataclasses import dataclass


@dataclass
class ResourceNamer:
    """
    Generates consistent resource names for AWS resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment (dev, staging, prod)
    """
    project: str
    environment: str

    def name(self, resource: str = "") -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'web', 'private'); empty for the base name

        Returns:
            Formatted resource name
        """
        base = f"{self.project}-{self.environment}"
        return f"{base}-{resource}" if resource else base
