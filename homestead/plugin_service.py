"""Zsh plugin management on top of a PluginManager."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from homestead.entities import ZshPlugin
from homestead.enums import PluginSource
from homestead.errors import HomesteadError, InvalidInputError
from homestead.interfaces import PluginManager, PluginProgressCallback


def _with_context(message: str, err: BaseException) -> HomesteadError:
    """Return an error of the same domain kind as err, prefixed with message."""
    if isinstance(err, HomesteadError):
        return type(err)(f"{message}: {err}")
    return HomesteadError(f"{message}: {err}")


@dataclass
class PluginInstallResult:
    """Outcome of installing one plugin."""

    plugin: ZshPlugin
    success: bool
    error: Optional[BaseException] = None


@dataclass
class PluginInstallationStatus:
    """Whether a plugin is installed, and any error met while checking."""

    plugin: ZshPlugin
    is_installed: bool
    error: Optional[BaseException] = None


@dataclass
class PluginService:
    """High-level operations on Zsh plugins."""

    plugin_manager: PluginManager
    available_plugins: list[ZshPlugin] = field(default_factory=list)

    def install_plugin(
        self,
        plugin: Optional[ZshPlugin],
        progress_callback: Optional[PluginProgressCallback] = None,
    ) -> None:
        """Validate and install a plugin, reporting progress."""
        try:
            self.validate_plugin(plugin)
        except HomesteadError as err:
            raise _with_context("invalid plugin", err) from err
        try:
            self.plugin_manager.install_plugin(plugin, progress_callback)
        except Exception as err:
            raise _with_context(
                f"failed to install plugin '{plugin.id}'", err
            ) from err

    def is_plugin_installed(self, plugin_id: str) -> bool:
        """Return True if the plugin is installed."""
        try:
            return self.plugin_manager.is_plugin_installed(plugin_id)
        except Exception as err:
            raise _with_context(
                f"failed to check if plugin '{plugin_id}' is installed", err
            ) from err

    def list_installed_plugins(self) -> list[str]:
        """Return the ids of installed plugins."""
        try:
            return self.plugin_manager.list_installed_plugins()
        except Exception as err:
            raise _with_context("failed to list installed plugins", err) from err

    def uninstall_plugin(self, plugin_id: str) -> None:
        """Remove an installed plugin."""
        try:
            self.plugin_manager.uninstall_plugin(plugin_id)
        except Exception as err:
            raise _with_context(
                f"failed to uninstall plugin '{plugin_id}'", err
            ) from err

    def update_plugin(self, plugin_id: str) -> None:
        """Update a plugin to its latest version."""
        try:
            self.plugin_manager.update_plugin(plugin_id)
        except Exception as err:
            raise _with_context(
                f"failed to update plugin '{plugin_id}'", err
            ) from err

    def validate_plugin(self, plugin: Optional[ZshPlugin]) -> None:
        """Raise if the plugin is missing or the manager rejects it."""
        if plugin is None:
            raise InvalidInputError("plugin is required")
        self.plugin_manager.validate_plugin(plugin)

    def get_plugins_by_source(self, source: PluginSource) -> list[ZshPlugin]:
        """Return the available plugins that come from the given source."""
        return [p for p in self.available_plugins if p.source == source]

    def get_plugin_by_id(self, plugin_id: str) -> Optional[ZshPlugin]:
        """Return the available plugin with this id, or None."""
        return next((p for p in self.available_plugins if p.id == plugin_id), None)

    def install_multiple_plugins(
        self,
        plugins: Iterable[ZshPlugin],
        progress_callback: Optional[PluginProgressCallback] = None,
    ) -> list[PluginInstallResult]:
        """Install each plugin in turn and report how each one went."""
        results = []
        for plugin in plugins:
            try:
                self.install_plugin(plugin, progress_callback)
            except Exception as err:
                results.append(PluginInstallResult(plugin, False, err))
            else:
                results.append(PluginInstallResult(plugin, True))
        return results

    def get_installation_status(self, plugin: ZshPlugin) -> PluginInstallationStatus:
        """Return whether the plugin is installed, keeping any error met."""
        try:
            installed = self.is_plugin_installed(plugin.id)
        except Exception as err:
            return PluginInstallationStatus(plugin, False, err)
        return PluginInstallationStatus(plugin, installed)