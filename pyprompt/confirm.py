"""
A prompt for a yes/no answer.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from . import colors
from .term import Key
from .selection import run_selection, result_or_exit, to_styling


@dataclass(frozen=True)
class ConfirmStyling:
    """Styling options for a confirmation prompt."""

    # Function to apply styling to the prompt message
    message_style: Callable[[str], str] = colors.default_message_style


@dataclass
class ConfirmState:
    title: str
    default: Optional[bool] = None
    style: ConfirmStyling = field(default_factory=ConfirmStyling)
    input_text: str = ""  # "", "Y" or "N"
    has_completed: bool = False

    def on_key(self, key):
        if key in ("Y", "y"):
            self.input_text = "Y"
        elif key in ("N", "n"):
            self.input_text = "N"
        elif key == Key.BACKSPACE:
            self.input_text = ""
        elif key == Key.ENTER:
            if not self.input_text:
                if self.default is None:
                    return None  # an answer is required
                self.input_text = "Y" if self.default else "N"
            self.has_completed = True
            return self.input_text == "Y"
        return None

    def render(self):
        if self.has_completed:
            hint = ""
        elif self.default is None:
            hint = "(Y/N) "
        elif self.default:
            hint = "(Y/n) "
        else:
            hint = "(y/N) "
        cursor = "" if self.has_completed else "█"
        line = f"{self.style.message_style(self.title)} {hint}{self.input_text}{cursor}"
        return [line]


async def maybe_confirm(
    message, default=None, no_clear=False, styling=None, manager=None
) -> Optional[bool]:
    """Prompt the user for confirmation (a yes/no answer).

    Returns whether the user confirmed, or None if stdin reaches EOF or
    the user cancels (ctrl-c) before the prompt completes.

    Args:
        message: text to display to the user for confirmation.
        default: the answer when the user just presses enter. If None, the
            user must type y or n.
        no_clear: whether to keep the answer on screen once completed.
        styling: a ConfirmStyling, or a dict to override the defaults.
        manager: the SessionManager to run the session on.
    """
    state = ConfirmState(message, default, to_styling(styling, ConfirmStyling))
    return await run_selection(
        state.render, state.on_key, no_clear=no_clear, manager=manager
    )


async def confirm(
    message, default=None, no_clear=False, styling=None, manager=None
) -> bool:
    """Prompt the user for confirmation (a yes/no answer).

    Like ``maybe_confirm()``, but exits the process with exit code 120 if
    stdin reaches EOF or the user cancels (ctrl-c) before the prompt
    completes.
    """
    result = await maybe_confirm(
        message, default=default, no_clear=no_clear, styling=styling, manager=manager
    )
    return result_or_exit(result)
