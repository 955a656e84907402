"""Default locations, environment variable names and starter config."""

from pathlib import Path

CONFIG_RELPATH = Path(".ssh") / "wrapper.toml"
DROPIN_RELPATH = Path(".ssh") / "wrapper.d"

ENV_CONFIG = "SSHWRAP_CONFIG"
ENV_SSH = "SSHWRAP_SSH"
ENV_DEBUG = "SSHWRAP_DEBUG"

DEFAULT_TOML = """\
# sshwrap configuration
# Rules are tried top to bottom; the first pattern matching the WHOLE host wins.
# {1}, {2}, ... in the template refer to the groups that captured something.
version = "1.0"

[ssh]
binary = "ssh"

[output]
debug = false

# [[patterns]]
# pattern = "dev-(\\\\d+)"
# template = "10.0.0.{1}"

# [[patterns]]
# pattern = "(\\\\w+)\\\\.corp"
# template = "{1}.internal.example.com"
"""
