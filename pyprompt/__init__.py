"""
pyprompt - interactive terminal prompts: multi-select and confirm.
"""

import logging

# No log output unless the application adds a handler
logging.getLogger("pyprompt").addHandler(logging.NullHandler())

from .term import Key  # noqa
from .session import SessionManager, session_manager  # noqa
from .selection import EXIT_CODE_CANCELLED, run_selection  # noqa
from .multi_select import (  # noqa
    MultiSelectOption,
    MultiSelectStyling,
    multi_select,
    maybe_multi_select,
)
from .confirm import ConfirmStyling, confirm, maybe_confirm  # noqa
from ._cli import cli  # noqa

__version__ = "0.1.0"
version_info = tuple(map(int, __version__.split(".")))
