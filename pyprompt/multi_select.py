"""
A prompt with a list of options, of which the user can select multiple.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from . import colors
from .term import Key
from .selection import run_selection, result_or_exit, to_styling


@dataclass
class MultiSelectOption:
    """A single option in a multi-select prompt."""

    text: str
    selected: bool = False


@dataclass(frozen=True)
class MultiSelectStyling:
    """Styling options for a multi-select prompt."""

    # The text to display next to selected options
    selected: str = "[x]"
    # The text to display next to unselected options
    unselected: str = "[ ]"
    # The text to display at the start of the currently active option
    pointer: str = ">"
    # The bullet for listing the selected options (when no_clear is set)
    list_bullet: str = "-"
    # Function to apply styling to the prompt message
    message_style: Callable[[str], str] = colors.default_message_style


def to_option(option):
    """Normalize a str, mapping or MultiSelectOption into a new MultiSelectOption."""
    if isinstance(option, str):
        return MultiSelectOption(option)
    elif isinstance(option, MultiSelectOption):
        return MultiSelectOption(option.text, option.selected)
    elif isinstance(option, dict):
        if "text" not in option:
            raise TypeError(f"Multi-select option has no \"text\": {option!r}")
        return MultiSelectOption(option["text"], bool(option.get("selected", False)))
    else:
        raise TypeError(f"Invalid option for multi-select: {option!r}")


@dataclass
class MultiSelectState:
    title: str
    items: List[MultiSelectOption]
    style: MultiSelectStyling = field(default_factory=MultiSelectStyling)
    active_index: int = 0
    has_completed: bool = False

    def on_key(self, key):
        if key == Key.UP or key == "k":
            if self.active_index == 0:
                self.active_index = len(self.items) - 1
            else:
                self.active_index -= 1
        elif key == Key.DOWN or key == "j":
            self.active_index = (self.active_index + 1) % len(self.items)
        elif key == Key.SPACE:
            item = self.items[self.active_index]
            item.selected = not item.selected
        elif key == Key.ENTER:
            self.has_completed = True
            return [i for i, item in enumerate(self.items) if item.selected]
        return None

    def render(self):
        style = self.style
        lines = [style.message_style(self.title)]
        if self.has_completed:
            selected = [item for item in self.items if item.selected]
            if not selected:
                lines.append(colors.italic(" <None>"))
            # Line the bullets up with where the pointer was
            indent = " " * (
                len(style.pointer) + len(style.selected) - len(style.list_bullet) - 2
            )
            for item in selected:
                lines.append(f"{indent}{style.list_bullet} {item.text}")
        else:
            for i, item in enumerate(self.items):
                if i == self.active_index:
                    prefix = f"{style.pointer} "
                else:
                    prefix = " " * (len(style.pointer) + 1)
                marker = style.selected if item.selected else style.unselected
                lines.append(f"{prefix}{marker} {item.text}")
        return lines


async def maybe_multi_select(
    message, options, no_clear=False, styling=None, manager=None
) -> Optional[List[int]]:
    """Prompt the user with a set of options, of which they can select multiple.

    Returns the (sorted) indices of the selected options, or None if stdin
    reaches EOF or the user cancels (ctrl-c) before the prompt completes.

    Args:
        message: the message displayed to prompt the user.
        options: a list of str, MultiSelectOption, or dicts with "text" and
            optionally "selected".
        no_clear: whether to keep the answer on screen once completed.
        styling: a MultiSelectStyling, or a dict to override the defaults.
        manager: the SessionManager to run the session on.
    """
    items = [to_option(option) for option in options]
    if not items:
        raise ValueError("A multi-select prompt needs at least one option.")
    state = MultiSelectState(message, items, to_styling(styling, MultiSelectStyling))
    return await run_selection(
        state.render, state.on_key, no_clear=no_clear, manager=manager
    )


async def multi_select(
    message, options, no_clear=False, styling=None, manager=None
) -> List[int]:
    """Prompt the user with a set of options, of which they can select multiple.

    Like ``maybe_multi_select()``, but exits the process with exit code 120
    if stdin reaches EOF or the user cancels (ctrl-c) before the prompt
    completes.
    """
    result = await maybe_multi_select(
        message, options, no_clear=no_clear, styling=styling, manager=manager
    )
    return result_or_exit(result)
