"""pueue-dash constants.

Defaults for the status command, refresh timing and rendering.
"""

from __future__ import annotations

# =============================================================================
# Status Command
# =============================================================================

#: Executable queried for the queue status
DEFAULT_STATUS_COMMAND: str = "pueue"

#: Arguments placed between the executable and the user's extra arguments
STATUS_ARGUMENTS: str = "--color always status"

# =============================================================================
# Timing
# =============================================================================

#: Seconds between automatic refreshes
DEFAULT_REFRESH_INTERVAL: float = 5.0

#: Seconds between checks of the refresh timer
DEFAULT_POLL_INTERVAL: float = 0.25

# =============================================================================
# Scrolling and Layout
# =============================================================================

#: Lines or columns moved by a page-sized scroll
DEFAULT_PAGE_SIZE: int = 20

#: Width of the argument popup as a percentage of the screen
DEFAULT_POPUP_WIDTH_PERCENT: int = 60

#: Popup height: one input line plus top and bottom border
POPUP_HEIGHT: int = 3

#: Shell exit codes meaning the command could not be found or executed
#: (126/127 for sh, 9009 for cmd.exe)
COMMAND_NOT_FOUND_EXIT_CODES: frozenset[int] = frozenset({126, 127, 9009})
