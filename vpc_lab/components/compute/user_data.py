"""
First-boot scripts for lab instances.

User data runs ONCE, at first boot, after the OS is up. There is no retry:
if the script fails the instance keeps running without the web server.
"""

import html

WEB_ROOT = "/var/www/html"


def index_page(welcome_message: str) -> str:
    """Render the static landing page served by Apache."""
    return f"<html><body><h1>{html.escape(welcome_message)}</h1></body></html>"


def apache_user_data(welcome_message: str) -> str:
    """
    Build the bootstrap script for the public web server.

    Installs httpd, starts and enables it, then writes the landing page.
    The page goes through a quoted heredoc so the shell never expands it.

    Args:
        welcome_message: Heading shown on the landing page

    Returns:
        Bash script passed to the instance as user data
    """
    return f"""#!/bin/bash
yum update -y
yum install -y httpd
systemctl start httpd
systemctl enable httpd
cat > {WEB_ROOT}/index.html << 'PAGE'
{index_page(welcome_message)}
PAGE
"""
