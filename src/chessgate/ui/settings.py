"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    # Whether an illegal second click keeps the piece selected.
    keep_selection_on_illegal_move: bool = False

    # Window
    window_size: int = 900  # px, square

    # Diagnostics
    log_level: str = "WARNING"
