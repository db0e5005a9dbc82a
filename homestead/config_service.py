"""Shell configuration management on top of a ConfigManager."""

from __future__ import annotations

from typing import Optional

from homestead.entities import ShellConfig
from homestead.enums import ConfigScope
from homestead.errors import HomesteadError, InvalidInputError
from homestead.interfaces import ConfigManager, ConfigSelections


def _with_context(message: str, err: BaseException) -> HomesteadError:
    """Return an error of the same domain kind as err, prefixed with message."""
    if isinstance(err, HomesteadError):
        return type(err)(f"{message}: {err}")
    return HomesteadError(f"{message}: {err}")


class ConfigService:
    """High-level operations on shell configurations."""

    def __init__(self, config_manager: ConfigManager) -> None:
        self._manager = config_manager

    def create_config(self, config: Optional[ShellConfig]) -> None:
        """Validate and store a new configuration."""
        try:
            self.validate_config(config)
        except InvalidInputError as err:
            raise InvalidInputError(f"invalid configuration: {err}") from err
        try:
            self._manager.save_config(config)
        except Exception as err:
            raise _with_context("failed to save configuration", err) from err

    def get_config(self, config_id: str) -> ShellConfig:
        """Load a configuration by id."""
        try:
            return self._manager.load_config(config_id)
        except Exception as err:
            raise _with_context(
                f"failed to load configuration '{config_id}'", err
            ) from err

    def list_configs(self) -> list[str]:
        """Return the names of all stored configurations."""
        try:
            return self._manager.list_configs()
        except Exception as err:
            raise _with_context("failed to list configurations", err) from err

    def delete_config(self, config_id: str) -> None:
        """Delete a configuration by id."""
        try:
            self._manager.delete_config(config_id)
        except Exception as err:
            raise _with_context(
                f"failed to delete configuration '{config_id}'", err
            ) from err

    def apply_config(self, selections: ConfigSelections) -> None:
        """Write the configuration for the selections to the system."""
        if not selections.core_components:
            raise InvalidInputError("at least one core component must be selected")
        try:
            self._manager.apply_config(selections)
        except Exception as err:
            raise _with_context("failed to apply configuration", err) from err

    def generate_zshrc(self, selections: ConfigSelections) -> str:
        """Render .zshrc content for the selections."""
        try:
            return self._manager.generate_zshrc(selections)
        except Exception as err:
            raise _with_context("failed to generate .zshrc", err) from err

    def merge_configs(
        self, general: Optional[ShellConfig], project: Optional[ShellConfig]
    ) -> ShellConfig:
        """Merge a general and a project configuration; the project wins on conflicts."""
        sources = [cfg for cfg in (general, project) if cfg is not None]
        merged = ShellConfig(
            id="merged", name="Merged Configuration", scope=ConfigScope.GENERAL
        )
        merged.plugins = list(
            dict.fromkeys(plugin for cfg in sources for plugin in cfg.plugins)
        )
        for cfg in sources:
            merged.aliases.update(cfg.aliases)
            merged.functions.update(cfg.functions)
            merged.env_vars.update(cfg.env_vars)
            merged.sourced_files.extend(cfg.sourced_files)
        return merged

    def validate_config(self, config: Optional[ShellConfig]) -> None:
        """Raise InvalidInputError if the configuration is missing or invalid."""
        if config is None:
            raise InvalidInputError("configuration is required")
        config.validate()

    def backup_current_config(self) -> None:
        """Back up the shell configuration currently in place."""
        try:
            self._manager.backup_existing_config()
        except Exception as err:
            raise _with_context(
                "failed to backup current configuration", err
            ) from err

    def get_configs_by_scope(self, scope: ConfigScope) -> list[ShellConfig]:
        """Return the stored configurations with the given scope.

        Configurations that fail to load are skipped.
        """
        names = self.list_configs()
        configs = []
        for name in names:
            try:
                config = self._manager.load_config(name)
            except Exception:
                continue
            if config.scope == scope:
                configs.append(config)
        return configs

    def update_config(self, config: Optional[ShellConfig]) -> None:
        """Validate, timestamp and store an existing configuration."""
        try:
            self.validate_config(config)
        except InvalidInputError as err:
            raise InvalidInputError(f"invalid configuration: {err}") from err
        config.touch()
        try:
            self._manager.save_config(config)
        except Exception as err:
            raise _with_context("failed to update configuration", err) from err

    def export_config(self, config_id: str, export_path: str) -> None:
        """Check that a configuration can be loaded for export to export_path."""
        config = self.get_config(config_id)
        if config is None:
            raise HomesteadError("loaded configuration is empty")