"""Domain entities: packages, scripts, shell configurations and Zsh plugins."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from homestead.enums import (
    Category,
    ConfigScope,
    PackageCategory,
    PluginSource,
    is_member,
)
from homestead.errors import InvalidInputError

_ZSH_CUSTOM_PLUGINS = "${ZSH_CUSTOM:-~/.oh-my-zsh/custom}/plugins"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Package:
    """A software package that can be installed."""

    id: str = ""
    name: str = ""
    description: str = ""
    version: str = ""
    category: PackageCategory | str = ""
    download_url: str = ""
    install_cmd: str = ""
    check_cmd: str = ""

    def validate(self) -> None:
        """Raise InvalidInputError if the package is incomplete."""
        if not self.id:
            raise InvalidInputError("package id is required")
        if not self.name:
            raise InvalidInputError("package name is required")
        if not self.download_url and not self.install_cmd:
            raise InvalidInputError(
                "package needs a download URL or an install command"
            )
        if not is_member(PackageCategory, self.category):
            raise InvalidInputError(f"invalid package category: {self.category}")

    def is_ide(self) -> bool:
        return self.category == PackageCategory.IDE

    def is_tool(self) -> bool:
        return self.category == PackageCategory.TOOL


@dataclass
class Script:
    """A system maintenance script."""

    id: str = ""
    name: str = ""
    description: str = ""
    path: str = ""
    category: Category | str = ""
    requires_sudo: bool = False

    def validate(self) -> None:
        """Raise InvalidInputError if the script is incomplete."""
        if not self.id:
            raise InvalidInputError("script id is required")
        if not self.name:
            raise InvalidInputError("script name is required")
        if not self.path:
            raise InvalidInputError("script path is required")
        if not is_member(Category, self.category):
            raise InvalidInputError(f"invalid script category: {self.category}")

    def is_cleanup(self) -> bool:
        return self.category == Category.CLEANUP

    def is_monitoring(self) -> bool:
        return self.category == Category.MONITORING

    def is_install(self) -> bool:
        return self.category == Category.INSTALL


@dataclass
class ShellConfig:
    """A shell configuration: plugins, aliases, functions and variables."""

    id: str = ""
    name: str = ""
    scope: ConfigScope | str = ""
    plugins: list[str] = field(default_factory=list)
    aliases: dict[str, str] = field(default_factory=dict)
    functions: dict[str, str] = field(default_factory=dict)
    env_vars: dict[str, str] = field(default_factory=dict)
    sourced_files: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=_now)
    modified_at: datetime = field(default_factory=_now)

    def validate(self) -> None:
        """Raise InvalidInputError if the configuration is incomplete."""
        if not self.id:
            raise InvalidInputError("config id is required")
        if not self.name:
            raise InvalidInputError("config name is required")
        if not is_member(ConfigScope, self.scope):
            raise InvalidInputError(f"invalid config scope: {self.scope}")

    def add_plugin(self, plugin: str) -> None:
        """Enable a plugin unless it is already enabled."""
        if plugin in self.plugins:
            return
        self.plugins.append(plugin)
        self.touch()

    def remove_plugin(self, plugin: str) -> None:
        self.plugins = [p for p in self.plugins if p != plugin]
        self.touch()

    def has_plugin(self, plugin: str) -> bool:
        return plugin in self.plugins

    def add_alias(self, name: str, command: str) -> None:
        self.aliases[name] = command
        self.touch()

    def add_function(self, name: str, body: str) -> None:
        self.functions[name] = body
        self.touch()

    def add_env_var(self, name: str, value: str) -> None:
        self.env_vars[name] = value
        self.touch()

    def is_general(self) -> bool:
        return self.scope == ConfigScope.GENERAL

    def is_project(self) -> bool:
        return self.scope == ConfigScope.PROJECT

    def is_tool(self) -> bool:
        return self.scope == ConfigScope.TOOL

    def touch(self) -> None:
        """Set the modification time to now."""
        self.modified_at = _now()


@dataclass
class ZshPlugin:
    """A Zsh / Oh My Zsh plugin."""

    id: str = ""
    name: str = ""
    description: str = ""
    source: PluginSource | str = ""
    repo_url: str = ""
    install_cmd: str = ""
    check_cmd: str = ""
    load_order: int = 0
    config_file: str = ""

    def validate(self) -> None:
        """Raise InvalidInputError if the plugin definition is incomplete."""
        if not self.id:
            raise InvalidInputError("plugin id is required")
        if not self.name:
            raise InvalidInputError("plugin name is required")
        if not is_member(PluginSource, self.source):
            raise InvalidInputError(f"invalid plugin source: {self.source}")
        if self.is_external() and not self.repo_url and not self.install_cmd:
            raise InvalidInputError(
                "external plugin needs a repository URL or an install command"
            )

    def is_builtin(self) -> bool:
        return self.source == PluginSource.BUILTIN

    def is_external(self) -> bool:
        return self.source == PluginSource.EXTERNAL

    def is_custom(self) -> bool:
        return self.source == PluginSource.CUSTOM

    def needs_installation(self) -> bool:
        """Return True if the plugin must be installed before use."""
        if self.is_builtin():
            return False
        if self.is_external():
            return True
        return self.is_custom() and bool(self.install_cmd)

    def install_command(self) -> str:
        """Return the shell command that installs the plugin, or ''."""
        if self.install_cmd:
            return self.install_cmd
        if self.is_builtin():
            return ""
        if self.is_external() and self.repo_url:
            return f"git clone {self.repo_url} {_ZSH_CUSTOM_PLUGINS}/{self.id}"
        return ""

    def check_command(self) -> str:
        """Return the shell command that checks the plugin is installed, or ''."""
        if self.check_cmd:
            return self.check_cmd
        if self.is_builtin():
            return f"test -f $ZSH/plugins/{self.id}/{self.id}.plugin.zsh"
        if self.is_external():
            return f"test -d {_ZSH_CUSTOM_PLUGINS}/{self.id}"
        return ""