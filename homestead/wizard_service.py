"""Step-by-step flow for choosing shell plugins and tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from homestead.errors import InvalidInputError
from homestead.interfaces import ConfigSelections


@dataclass(frozen=True)
class WizardStep:
    """One step of the wizard."""

    name: str
    description: str
    required: bool = False


@dataclass
class WizardState:
    """Where a wizard session is and what has been selected so far."""

    current_step: int = 0
    selections: ConfigSelections = field(default_factory=ConfigSelections)
    completed: bool = False


_DEFAULT_STEPS = (
    WizardStep("Plugins", "Select Zsh plugins to install", False),
    WizardStep("Development Tools", "Select development tools (NVM, Bun, etc)", False),
    WizardStep(
        "Review & Confirm", "Review your selections and apply configuration", True
    ),
)


def _add_unique(items: list[str], item: str) -> None:
    if item not in items:
        items.append(item)


def _section(title: str, items: list[str]) -> list[str]:
    lines = [f"{title}:"]
    if items:
        lines.extend(f"  - {item}" for item in items)
    else:
        lines.append("  (none selected)")
    return lines


class WizardService:
    """Drives wizard sessions; core components are installed separately."""

    def __init__(self) -> None:
        self._steps = _DEFAULT_STEPS

    def create_new_wizard(self) -> WizardState:
        """Start a new session at the first step with nothing selected."""
        return WizardState()

    def current_step(self, state: WizardState) -> Optional[WizardStep]:
        """Return the step the session is on, or None if out of range."""
        if 0 <= state.current_step < len(self._steps):
            return self._steps[state.current_step]
        return None

    def next_step(self, state: WizardState) -> None:
        """Advance to the next step."""
        if state.current_step >= len(self._steps) - 1:
            raise InvalidInputError("already at last step")
        state.current_step += 1

    def previous_step(self, state: WizardState) -> None:
        """Go back to the previous step."""
        if state.current_step <= 0:
            raise InvalidInputError("already at first step")
        state.current_step -= 1

    def is_first_step(self, state: WizardState) -> bool:
        return state.current_step == 0

    def is_last_step(self, state: WizardState) -> bool:
        return state.current_step == len(self._steps) - 1

    def add_core_component(self, state: WizardState, component: str) -> None:
        _add_unique(state.selections.core_components, component)

    def remove_core_component(self, state: WizardState, component: str) -> None:
        state.selections.core_components = [
            c for c in state.selections.core_components if c != component
        ]

    def add_plugin(self, state: WizardState, plugin: str) -> None:
        _add_unique(state.selections.plugins, plugin)

    def remove_plugin(self, state: WizardState, plugin: str) -> None:
        state.selections.plugins = [p for p in state.selections.plugins if p != plugin]

    def add_tool(self, state: WizardState, tool: str) -> None:
        _add_unique(state.selections.tools, tool)

    def remove_tool(self, state: WizardState, tool: str) -> None:
        state.selections.tools = [t for t in state.selections.tools if t != tool]

    def generate_preview(self, state: WizardState) -> str:
        """Return a text summary of the current selections."""
        selections = state.selections
        lines = ["=== Configuration Preview ===", ""]
        lines += _section("Core Components", selections.core_components)
        lines.append("")
        lines += _section("Plugins", selections.plugins)
        lines.append("")
        lines += _section("Development Tools", selections.tools)
        return "\n".join(lines) + "\n"

    def validate_selections(self, state: WizardState) -> None:
        """Accept any selections; core components are installed beforehand."""

    def total_steps(self) -> int:
        return len(self._steps)

    def progress(self, state: WizardState) -> int:
        """Return the progress through the wizard as a percentage."""
        if not self._steps:
            return 0
        return state.current_step * 100 // len(self._steps)

    def reset(self, state: WizardState) -> None:
        """Return the session to the first step with nothing selected."""
        state.current_step = 0
        state.selections = ConfigSelections()
        state.completed = False

    def can_proceed(self, state: WizardState) -> bool:
        return self.current_step(state) is not None

    def complete(self, state: WizardState) -> None:
        state.completed = True