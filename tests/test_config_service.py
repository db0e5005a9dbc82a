from __future__ import annotations

import pytest

from homestead.config_service import ConfigService
from homestead.entities import ShellConfig
from homestead.enums import ConfigScope
from homestead.errors import HomesteadError, InvalidInputError, NotFoundError
from homestead.interfaces import ConfigManager, ConfigSelections


class FakeConfigManager(ConfigManager):
    def __init__(self) -> None:
        self.configs: dict[str, ShellConfig] = {}
        self.broken: set[str] = set()
        self.applied: list[ConfigSelections] = []
        self.backups = 0
        self.fail_save = False

    def save_config(self, config):
        if self.fail_save:
            raise OSError("disk full")
        self.configs[config.id] = config

    def load_config(self, config_name):
        if config_name in self.broken:
            raise OSError("corrupt file")
        try:
            return self.configs[config_name]
        except KeyError:
            raise NotFoundError(f"config {config_name} not found") from None

    def delete_config(self, config_name):
        if config_name not in self.configs:
            raise NotFoundError(f"config {config_name} not found")
        del self.configs[config_name]

    def list_configs(self):
        return sorted(set(self.configs) | self.broken)

    def generate_zshrc(self, selections):
        lines = ['export ZSH="$HOME/.oh-my-zsh"']
        lines.append(f"plugins=({' '.join(selections.plugins)})")
        return "\n".join(lines) + "\n"

    def generate_aliases_file(self, config):
        return "".join(f"alias {k}='{v}'\n" for k, v in config.aliases.items())

    def generate_functions_file(self, config):
        return "".join(f"{k}() {{ {v} }}\n" for k, v in config.functions.items())

    def backup_existing_config(self):
        self.backups += 1

    def apply_config(self, selections):
        self.applied.append(selections)


@pytest.fixture
def manager():
    return FakeConfigManager()


@pytest.fixture
def service(manager):
    return ConfigService(manager)


def test_create_config(service, manager):
    cfg = ShellConfig(
        id="test-config",
        name="Test Configuration",
        scope=ConfigScope.GENERAL,
        plugins=["git", "docker"],
        aliases={"ll": "ls -la"},
    )
    service.create_config(cfg)
    loaded = manager.load_config("test-config")
    assert loaded.id == cfg.id
    assert loaded.plugins == ["git", "docker"]


def test_create_config_invalid(service, manager):
    cfg = ShellConfig(name="Invalid", scope=ConfigScope.GENERAL)
    with pytest.raises(InvalidInputError, match="invalid configuration"):
        service.create_config(cfg)
    assert manager.configs == {}


def test_create_config_none(service):
    with pytest.raises(InvalidInputError):
        service.create_config(None)


def test_create_config_save_failure_is_wrapped(service, manager):
    manager.fail_save = True
    cfg = ShellConfig(id="x", name="X", scope=ConfigScope.GENERAL)
    with pytest.raises(HomesteadError, match="failed to save configuration"):
        service.create_config(cfg)


def test_get_config(service, manager):
    cfg = ShellConfig(
        id="get-test", name="Get Test", scope=ConfigScope.GENERAL, plugins=["git"]
    )
    manager.save_config(cfg)
    retrieved = service.get_config("get-test")
    assert retrieved.id == cfg.id


def test_get_config_not_found(service):
    with pytest.raises(NotFoundError, match="non-existent"):
        service.get_config("non-existent")


def test_list_configs(service, manager):
    configs = [
        ShellConfig(id="config1", name="Config 1", scope=ConfigScope.GENERAL),
        ShellConfig(id="config2", name="Config 2", scope=ConfigScope.PROJECT),
    ]
    for cfg in configs:
        manager.save_config(cfg)
    listed = service.list_configs()
    assert len(listed) == len(configs)
    assert set(listed) == {"config1", "config2"}


def test_delete_config(service, manager):
    manager.save_config(
        ShellConfig(id="delete-test", name="Delete Test", scope=ConfigScope.GENERAL)
    )
    service.delete_config("delete-test")
    with pytest.raises(NotFoundError):
        manager.load_config("delete-test")


def test_delete_config_missing(service):
    with pytest.raises(NotFoundError, match="failed to delete configuration"):
        service.delete_config("ghost")


def test_apply_config(service, manager):
    selections = ConfigSelections(
        core_components=["zsh", "oh-my-zsh"],
        plugins=["git", "docker"],
        tools=["nvm"],
    )
    service.apply_config(selections)
    assert manager.applied == [selections]


def test_apply_config_requires_core_component(service, manager):
    with pytest.raises(InvalidInputError, match="core component"):
        service.apply_config(ConfigSelections(plugins=["git"]))
    assert manager.applied == []


def test_generate_zshrc(service):
    selections = ConfigSelections(
        core_components=["zsh", "oh-my-zsh", "powerlevel10k"],
        plugins=["git", "docker"],
        tools=["nvm", "bun"],
    )
    zshrc = service.generate_zshrc(selections)
    assert "oh-my-zsh" in zshrc
    assert "plugins=" in zshrc


def test_merge_configs(service):
    general = ShellConfig(
        id="general",
        name="General Config",
        scope=ConfigScope.GENERAL,
        aliases={"ll": "ls -la", "la": "ls -A"},
        plugins=["git", "docker"],
    )
    project = ShellConfig(
        id="project",
        name="Project Config",
        scope=ConfigScope.PROJECT,
        aliases={"ll": "ls -lah", "psr": "cd ~/project && bundle exec rails s"},
        plugins=["rails"],
    )
    merged = service.merge_configs(general, project)
    assert len(merged.plugins) == 3
    assert set(merged.plugins) == {"git", "docker", "rails"}
    assert merged.aliases["ll"] == "ls -lah"
    assert merged.aliases["la"] == "ls -A"
    assert merged.aliases["psr"] == "cd ~/project && bundle exec rails s"
    assert merged.id == "merged"
    assert merged.name == "Merged Configuration"
    assert merged.scope == ConfigScope.GENERAL


def test_merge_configs_deduplicates_and_combines(service):
    general = ShellConfig(
        id="g",
        name="G",
        scope=ConfigScope.GENERAL,
        plugins=["git"],
        functions={"f": "one"},
        env_vars={"EDITOR": "vim"},
        sourced_files=["a.zsh"],
    )
    project = ShellConfig(
        id="p",
        name="P",
        scope=ConfigScope.PROJECT,
        plugins=["git"],
        functions={"f": "two"},
        env_vars={"EDITOR": "nano", "PAGER": "less"},
        sourced_files=["b.zsh"],
    )
    merged = service.merge_configs(general, project)
    assert merged.plugins == ["git"]
    assert merged.functions == {"f": "two"}
    assert merged.env_vars == {"EDITOR": "nano", "PAGER": "less"}
    assert merged.sourced_files == ["a.zsh", "b.zsh"]


def test_merge_configs_with_missing_side(service):
    general = ShellConfig(
        id="g", name="G", scope=ConfigScope.GENERAL, aliases={"ll": "ls -la"}
    )
    merged = service.merge_configs(general, None)
    assert merged.aliases == {"ll": "ls -la"}
    assert service.merge_configs(None, None).plugins == []


@pytest.mark.parametrize(
    "config, valid",
    [
        (ShellConfig(id="valid", name="Valid Config", scope=ConfigScope.GENERAL), True),
        (ShellConfig(name="Invalid", scope=ConfigScope.GENERAL), False),
        (ShellConfig(id="invalid", scope=ConfigScope.GENERAL), False),
        (ShellConfig(id="invalid", name="Invalid", scope="invalid"), False),
    ],
    ids=["valid", "missing-id", "missing-name", "invalid-scope"],
)
def test_validate_config(service, config, valid):
    if valid:
        assert service.validate_config(config) is None
    else:
        with pytest.raises(InvalidInputError):
            service.validate_config(config)


def test_backup_current_config(service, manager):
    result = service.backup_current_config()
    assert result is None
    assert manager.backups == 1
    service.backup_current_config()
    assert manager.backups == 2


def test_get_configs_by_scope(service, manager):
    for cfg in [
        ShellConfig(id="general1", name="General 1", scope=ConfigScope.GENERAL),
        ShellConfig(id="general2", name="General 2", scope=ConfigScope.GENERAL),
        ShellConfig(id="project1", name="Project 1", scope=ConfigScope.PROJECT),
    ]:
        manager.save_config(cfg)
    general = service.get_configs_by_scope(ConfigScope.GENERAL)
    assert len(general) == 2
    assert {c.id for c in general} == {"general1", "general2"}
    project = service.get_configs_by_scope(ConfigScope.PROJECT)
    assert len(project) == 1


def test_get_configs_by_scope_skips_unloadable(service, manager):
    manager.save_config(ShellConfig(id="ok", name="Ok", scope=ConfigScope.TOOL))
    manager.broken.add("broken")
    result = service.get_configs_by_scope(ConfigScope.TOOL)
    assert [c.id for c in result] == ["ok"]


def test_update_config_touches_and_saves(service, manager):
    cfg = ShellConfig(id="u", name="U", scope=ConfigScope.GENERAL)
    before = cfg.modified_at
    service.update_config(cfg)
    assert manager.configs["u"] is cfg
    assert cfg.modified_at >= before


def test_update_config_invalid(service, manager):
    with pytest.raises(InvalidInputError, match="invalid configuration"):
        service.update_config(ShellConfig(id="u", scope=ConfigScope.GENERAL))
    assert manager.configs == {}


def test_export_config_missing(service, tmp_path):
    with pytest.raises(NotFoundError):
        service.export_config("nothing", str(tmp_path / "out"))


def test_export_config_existing(service, manager, tmp_path):
    manager.save_config(ShellConfig(id="e", name="E", scope=ConfigScope.GENERAL))
    assert service.export_config("e", str(tmp_path / "out")) is None
    assert "e" in manager.configs