# homestead

Building blocks for setting up a Zsh-based workstation: installable
packages, maintenance scripts, shell configurations, Oh My Zsh plugins,
a step-by-step configuration wizard and a git repository for your dotfiles.

The package is a library. It defines the domain model and the services that
orchestrate it; concrete storage, installers and executors are supplied by
you through the abstract interfaces in `homestead.interfaces`.

## Installing

```
pip install .
```

Python 3.10 or later is required. There are no runtime dependencies.

## What is inside

- `homestead.errors` – `HomesteadError` and its subclasses `NotFoundError`,
  `AlreadyExistsError`, `InvalidInputError`, `PermissionDeniedError`,
  `ExecutionFailedError` and `DependencyNotMetError`.
- `homestead.enums` – `Category`, `ConfigScope`, `PackageCategory`,
  `PluginSource`, and `is_member(enum_type, value)` for checking raw values.
- `homestead.entities` – `Package`, `Script`, `ShellConfig` and `ZshPlugin`,
  each with a `validate()` method that raises `InvalidInputError`.
- `homestead.interfaces` – `ConfigSelections`, the progress records
  `InstallProgress` and `PluginInstallProgress`, and the abstract base
  classes `ConfigManager`, `ScriptExecutor`, `PackageInstaller`,
  `PackageRepository`, `PluginManager` and `ScriptRepository`.
- `homestead.config_service.ConfigService` – create, load, list, delete,
  update, validate and merge shell configurations, and pass `.zshrc`
  generation, backup and apply requests to a `ConfigManager`. When merging,
  plugins are combined without duplicates and the project's aliases,
  functions and variables override the general ones.
- `homestead.installer_service.InstallerService` – look up packages by id
  or category (or several categories, each id once), install with a
  progress callback, check and uninstall.
- `homestead.script_service.ScriptService` – look up, check and run
  maintenance scripts.
- `homestead.plugin_service.PluginService` – validate, install (one or
  many), check, list, update and uninstall plugins, and filter the
  `available_plugins` list by source or id.
- `homestead.wizard_service.WizardService` – a three-step session
  (Plugins, Development Tools, Review & Confirm) held in a `WizardState`.
  Moving past either end raises `InvalidInputError`.
- `homestead.repo_service.RepoService` – a git repository for dotfiles,
  plus `expand_home`, `create_github_repo_with_gh`, `DEFAULT_REPO_DIR_NAME`
  and `DEFAULT_DOTFILES_PATHS`. Failures are raised as `RepoError`.

Errors raised by the services keep the kind of the underlying domain error
and prefix its message with what was being done.

## Examples

A shell configuration:

```python
from homestead.entities import ShellConfig
from homestead.enums import ConfigScope

config = ShellConfig(id="general", name="General", scope=ConfigScope.GENERAL)
config.add_plugin("git")
config.add_alias("ll", "ls -la")
config.validate()
```

Plugin commands:

```python
from homestead.entities import ZshPlugin
from homestead.enums import PluginSource

plugin = ZshPlugin(
    id="zsh-autosuggestions",
    name="Zsh Autosuggestions",
    source=PluginSource.EXTERNAL,
    repo_url="https://example.com/zsh-autosuggestions.git",
)
print(plugin.install_command())
print(plugin.check_command())
```

Walking through the wizard:

```python
from homestead.wizard_service import WizardService

wizard = WizardService()
state = wizard.create_new_wizard()
wizard.add_plugin(state, "git")
wizard.add_tool(state, "nvm")
while not wizard.is_last_step(state):
    wizard.next_step(state)
print(wizard.generate_preview(state))
wizard.complete(state)
```

Keeping dotfiles in git (requires `git` on the `PATH`):

```python
from homestead.repo_service import RepoService

repo = RepoService("~/.config/homestead-dotfiles")
if not repo.is_repo():
    repo.init_repo()
repo.copy_to_repo("~", [".zshrc", ".zsh"])
repo.commit_all("Update dotfiles")
```

`create_github_repo_with_gh` additionally needs the GitHub CLI `gh`,
installed and logged in.

## What it does not do

- There is no command-line program or terminal interface; the package is
  used from Python code.
- It ships no concrete `ConfigManager`, `PackageInstaller`,
  `PackageRepository`, `PluginManager`, `ScriptRepository` or
  `ScriptExecutor`. It has no catalogue of packages or scripts, does not
  write `.zshrc` files itself and does not install anything by itself; you
  provide implementations of those interfaces.
- `ConfigService.export_config` only checks that the configuration can be
  loaded; it does not write anything to the export path.

## Running the tests

```
pip install ".[test]"
pytest
```