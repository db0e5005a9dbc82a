"""Abstract contracts for repositories, installers and managers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Optional

from homestead.entities import Package, Script, ShellConfig, ZshPlugin
from homestead.enums import Category, PackageCategory


@dataclass
class ConfigSelections:
    """What the user picked while configuring the shell."""

    core_components: list[str] = field(default_factory=list)
    plugins: list[str] = field(default_factory=list)
    tools: list[str] = field(default_factory=list)
    custom_aliases: dict[str, str] = field(default_factory=dict)
    custom_functions: dict[str, str] = field(default_factory=dict)
    custom_env_vars: dict[str, str] = field(default_factory=dict)


@dataclass
class InstallProgress:
    """Progress report for a package installation."""

    package: Optional[Package] = None
    status: str = ""
    progress: int = 0
    message: str = ""
    error: Optional[BaseException] = None
    can_abort: bool = False
    is_aborted: bool = False
    is_completed: bool = False


@dataclass
class PluginInstallProgress:
    """Progress report for a plugin installation."""

    plugin_id: str = ""
    plugin_name: str = ""
    status: str = ""
    progress: int = 0
    message: str = ""
    error: Optional[BaseException] = None
    is_completed: bool = False


ProgressCallback = Callable[[InstallProgress], None]
PluginProgressCallback = Callable[[PluginInstallProgress], None]


class ConfigManager(ABC):
    """Stores shell configurations and renders them to files."""

    @abstractmethod
    def save_config(self, config: ShellConfig) -> None:
        """Persist a configuration."""

    @abstractmethod
    def load_config(self, config_name: str) -> ShellConfig:
        """Load a configuration by name."""

    @abstractmethod
    def delete_config(self, config_name: str) -> None:
        """Remove a configuration."""

    @abstractmethod
    def list_configs(self) -> list[str]:
        """Return the names of all stored configurations."""

    @abstractmethod
    def generate_zshrc(self, selections: ConfigSelections) -> str:
        """Render .zshrc content for the selections."""

    @abstractmethod
    def generate_aliases_file(self, config: ShellConfig) -> str:
        """Render aliases file content for a configuration."""

    @abstractmethod
    def generate_functions_file(self, config: ShellConfig) -> str:
        """Render functions file content for a configuration."""

    @abstractmethod
    def backup_existing_config(self) -> None:
        """Back up the current .zshrc and related files."""

    @abstractmethod
    def apply_config(self, selections: ConfigSelections) -> None:
        """Write the generated configuration to the filesystem."""


class ScriptExecutor(ABC):
    """Runs maintenance scripts."""

    @abstractmethod
    def execute(self, script: Script) -> None:
        """Run a script."""

    @abstractmethod
    def can_execute(self, script: Script) -> bool:
        """Return True if the script can be run."""

    @abstractmethod
    def validate(self, script: Script) -> None:
        """Raise if the script cannot be run."""


class PackageInstaller(ABC):
    """Installs and removes packages."""

    @abstractmethod
    def install(
        self, package: Package, progress_callback: Optional[ProgressCallback]
    ) -> None:
        """Install a package, reporting progress."""

    @abstractmethod
    def is_installed(self, package: Package) -> bool:
        """Return True if the package is already installed."""

    @abstractmethod
    def uninstall(self, package: Package) -> None:
        """Remove a package."""

    @abstractmethod
    def can_install(self, package: Package) -> bool:
        """Return True if this system can install the package."""


class PackageRepository(ABC):
    """Source of installable packages."""

    @abstractmethod
    def find_all(self) -> list[Package]:
        """Return every package."""

    @abstractmethod
    def find_by_id(self, package_id: str) -> Package:
        """Return the package with this id or raise NotFoundError."""

    @abstractmethod
    def find_by_category(self, category: PackageCategory) -> list[Package]:
        """Return the packages in a category."""

    @abstractmethod
    def save(self, package: Package) -> None:
        """Store a package."""

    @abstractmethod
    def delete(self, package_id: str) -> None:
        """Remove a package."""

    @abstractmethod
    def exists(self, package_id: str) -> bool:
        """Return True if a package with this id exists."""


class PluginManager(ABC):
    """Installs and manages Zsh plugins."""

    @abstractmethod
    def install_plugin(
        self, plugin: ZshPlugin, progress_callback: Optional[PluginProgressCallback]
    ) -> None:
        """Install a plugin, reporting progress."""

    @abstractmethod
    def is_plugin_installed(self, plugin_id: str) -> bool:
        """Return True if the plugin is installed."""

    @abstractmethod
    def uninstall_plugin(self, plugin_id: str) -> None:
        """Remove an installed plugin."""

    @abstractmethod
    def list_installed_plugins(self) -> list[str]:
        """Return the ids of installed plugins."""

    @abstractmethod
    def update_plugin(self, plugin_id: str) -> None:
        """Update an external plugin to its latest version."""

    @abstractmethod
    def validate_plugin(self, plugin: ZshPlugin) -> None:
        """Raise if the plugin definition or installation is invalid."""


class ScriptRepository(ABC):
    """Source of maintenance scripts."""

    @abstractmethod
    def find_all(self) -> list[Script]:
        """Return every script."""

    @abstractmethod
    def find_by_id(self, script_id: str) -> Script:
        """Return the script with this id or raise NotFoundError."""

    @abstractmethod
    def find_by_category(self, category: Category) -> list[Script]:
        """Return the scripts in a category."""

    @abstractmethod
    def save(self, script: Script) -> None:
        """Store a script."""

    @abstractmethod
    def delete(self, script_id: str) -> None:
        """Remove a script."""

    @abstractmethod
    def exists(self, script_id: str) -> bool:
        """Return True if a script with this id exists."""