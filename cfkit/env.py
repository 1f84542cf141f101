"""Access to environment variables and the home directory."""

from __future__ import annotations

import os

_WINDOWS = os.name == "nt"


def get_env(name: str) -> str:
    """Return the value of an environment variable; KeyError if unset."""
    if not name:
        raise ValueError("variable name must not be empty")
    value = os.environ.get(name)
    if value is None:
        raise KeyError(name)
    return value


def set_env(name: str, value: str) -> None:
    """Set an environment variable, replacing any previous value."""
    if not name or "=" in name or "\0" in name:
        raise ValueError(f"invalid environment variable name {name!r}")
    if "\0" in value:
        raise ValueError("value must not contain NUL")
    os.environ[name] = value


def delete_env(name: str) -> None:
    """Remove an environment variable if it is set."""
    if not name:
        raise ValueError("variable name must not be empty")
    os.environ.pop(name, None)


def get_home() -> str:
    """Return the user's home directory from the environment."""
    if _WINDOWS:
        return get_env("HOMEDRIVE") + get_env("HOMEPATH")
    return get_env("HOME")