"""Domain model and services for setting up a Zsh workstation."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "enums",
    "entities",
    "interfaces",
    "config_service",
    "installer_service",
    "script_service",
    "plugin_service",
    "wizard_service",
    "repo_service",
]