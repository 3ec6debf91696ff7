"""Build shell commands for driving detached screen sessions."""

from __future__ import annotations


def attach_execute_command(session: str, cmd: str) -> str:
    """A command that types ``cmd`` followed by a newline escape into a screen session."""
    return f'screen -S {session} -X stuff "{cmd}\\n"'