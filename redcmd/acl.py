"""Commands on the access control list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from redcmd.command import Command, cmd


def acl_load() -> Command:
    """Reload the ACL rules from the configured ACL file."""
    return cmd("ACL").arg("LOAD")


def acl_save() -> Command:
    """Save the current ACL rules to the configured ACL file."""
    return cmd("ACL").arg("SAVE")


def acl_list() -> Command:
    """Show the active ACL rules."""
    return cmd("ACL").arg("LIST")


def acl_users() -> Command:
    """List the usernames of all configured users."""
    return cmd("ACL").arg("USERS")


def acl_getuser(username: Any) -> Command:
    """Return the rules defined for a user."""
    return cmd("ACL").arg("GETUSER").arg(username)


def acl_setuser(username: Any) -> Command:
    """Create a user without any privilege."""
    return cmd("ACL").arg("SETUSER").arg(username)


def acl_deluser(usernames: Iterable[Any]) -> Command:
    """Delete users and close the connections authenticated as them."""
    if isinstance(usernames, (str, bytes, bytearray, memoryview)):
        raise TypeError("usernames must be a sequence of names, not a single name")
    return cmd("ACL").arg("DELUSER").arg(list(usernames))


def acl_cat() -> Command:
    """Show the available ACL categories."""
    return cmd("ACL").arg("CAT")


def acl_cat_categoryname(categoryname: Any) -> Command:
    """Show the commands in a category."""
    return cmd("ACL").arg("CAT").arg(categoryname)


def acl_genpass() -> Command:
    """Generate a 256-bit password."""
    return cmd("ACL").arg("GENPASS")


def acl_genpass_bits(bits: int) -> Command:
    """Generate a password of the given number of bits."""
    return cmd("ACL").arg("GENPASS").arg(bits)


def acl_whoami() -> Command:
    """Return the username of the current connection."""
    return cmd("ACL").arg("WHOAMI")


def acl_log(count: int) -> Command:
    """Show recent ACL security events."""
    return cmd("ACL").arg("LOG").arg(count)


def acl_log_reset() -> Command:
    """Clear the ACL log."""
    return cmd("ACL").arg("LOG").arg("RESET")


def acl_help() -> Command:
    """Return the help text for the ACL subcommands."""
    return cmd("ACL").arg("HELP")