"""Maintenance script lookup and execution."""

from __future__ import annotations

from homestead.entities import Script
from homestead.enums import Category, is_member
from homestead.errors import HomesteadError, InvalidInputError
from homestead.interfaces import ScriptExecutor, ScriptRepository


def _with_context(message: str, err: BaseException) -> HomesteadError:
    """Return an error of the same domain kind as err, prefixed with message."""
    if isinstance(err, HomesteadError):
        return type(err)(f"{message}: {err}")
    return HomesteadError(f"{message}: {err}")


class ScriptService:
    """Finds and runs maintenance scripts."""

    def __init__(self, repo: ScriptRepository, executor: ScriptExecutor) -> None:
        self._repo = repo
        self._executor = executor

    def get_all_scripts(self) -> list[Script]:
        """Return every script."""
        return self._repo.find_all()

    def get_script_by_id(self, script_id: str) -> Script:
        """Return the script with this id."""
        if not script_id:
            raise InvalidInputError("get script: invalid input")
        return self._repo.find_by_id(script_id)

    def get_scripts_by_category(self, category: Category) -> list[Script]:
        """Return the scripts in a category."""
        if not is_member(Category, category):
            raise InvalidInputError(
                f"get scripts by category: invalid category {category}"
            )
        return self._repo.find_by_category(category)

    def execute_script(self, script_id: str) -> None:
        """Validate and run the script with this id."""
        if not script_id:
            raise InvalidInputError("execute script: invalid input")
        context = f"execute script {script_id}"
        try:
            script = self._repo.find_by_id(script_id)
            self._executor.validate(script)
            self._executor.execute(script)
        except Exception as err:
            raise _with_context(context, err) from err

    def can_execute_script(self, script_id: str) -> bool:
        """Return True if the script exists and can be run."""
        try:
            script = self._repo.find_by_id(script_id)
        except HomesteadError:
            return False
        return self._executor.can_execute(script)

    def script_exists(self, script_id: str) -> bool:
        """Return True if a script with this id exists."""
        return self._repo.exists(script_id)