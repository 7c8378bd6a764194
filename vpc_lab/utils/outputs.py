"""
Stack output helpers.

Builds derived outputs (the web server URL) and mirrors resolved stack
outputs into a .env file for local tooling.
"""

from pathlib import Path

import pulumi


def public_url(public_ip: pulumi.Input[str]) -> pulumi.Output[str]:
    """Build the HTTP URL of an instance from its public IP."""
    return pulumi.Output.concat("http://", public_ip)


def _render_env(values: dict[str, str]) -> str:
    lines = [f"{key.upper()}={value}" for key, value in sorted(values.items())]
    return "\n".join(lines) + "\n"


def write_outputs_to_env(
    outputs: dict[str, pulumi.Input[str]],
    path: str,
) -> pulumi.Output[str]:
    """
    Write resolved stack outputs to a .env file.

    Keys are upper-cased (public_url -> PUBLIC_URL). The file is only
    written once every output is known, so previews leave it untouched.

    Args:
        outputs: Mapping of output name to value or Output
        path: Destination file path

    Returns:
        Output resolving to the rendered file content
    """
    def _write(values: dict[str, str]) -> str:
        content = _render_env(values)
        if not pulumi.runtime.is_dry_run():
            Path(path).write_text(content)
            pulumi.log.info(f"Wrote {len(values)} outputs to {path}")
        return content

    return pulumi.Output.all(**outputs).apply(_write)
