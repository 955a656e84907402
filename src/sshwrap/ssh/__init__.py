"""ssh client interface: command building and process launch."""

from sshwrap.ssh.launcher import SSHError, build_command, run_ssh

__all__ = ["SSHError", "build_command", "run_ssh"]
