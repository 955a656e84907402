"""sshwrap: rewrite ssh target hosts with regex rules."""

__version__ = "0.1.0"
