"""Enumerations of categories, scopes and plugin sources."""

from __future__ import annotations

from enum import Enum


class _TextEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class Category(_TextEnum):
    """Category of a maintenance script."""

    CLEANUP = "cleanup"
    MONITORING = "monitoring"
    INSTALL = "install"


class ConfigScope(_TextEnum):
    """Scope of a shell configuration."""

    GENERAL = "general"
    PROJECT = "project"
    TOOL = "tool"


class PackageCategory(_TextEnum):
    """Category of an installable package."""

    IDE = "ide"
    TOOL = "tool"
    APP = "app"
    ZSH_CORE = "zsh_core"
    TERMINAL = "terminal"
    SHELL = "shell"
    AI = "ai"
    GAMES = "games"


class PluginSource(_TextEnum):
    """Where a Zsh plugin comes from."""

    BUILTIN = "builtin"
    EXTERNAL = "external"
    CUSTOM = "custom"


def is_member(enum_type: type[Enum], value: object) -> bool:
    """Return True if value is a member of enum_type or one of its values."""
    if isinstance(value, Enum):
        return isinstance(value, enum_type)
    return any(member.value == value for member in enum_type)