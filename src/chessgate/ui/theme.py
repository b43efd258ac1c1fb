"""Visual theme constants for the board."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    piece_white: QColor
    piece_black: QColor
    selection_outline: QColor  # selected piece origin
    highlight_check: QColor  # king in check
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(255, 255, 255),
            dark_square=QColor(130, 130, 130),
            piece_white=QColor(250, 250, 250),
            piece_black=QColor(20, 20, 20),
            selection_outline=QColor(253, 249, 0),  # yellow
            highlight_check=QColor(255, 0, 0, 120),  # red transparent
            coord_light=QColor(130, 130, 130),
            coord_dark=QColor(255, 255, 255),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            piece_white=QColor(250, 250, 250),
            piece_black=QColor(20, 20, 20),
            selection_outline=QColor(253, 249, 0),
            highlight_check=QColor(255, 0, 0, 120),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            piece_white=QColor(250, 250, 250),
            piece_black=QColor(20, 20, 20),
            selection_outline=QColor(253, 249, 0),
            highlight_check=QColor(255, 0, 0, 120),
            coord_light=QColor(112, 149, 120),
            coord_dark=QColor(236, 238, 220),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Look up a preset by its settings name; unknown names fall back."""
        presets = {
            "Classic": cls.default,
            "Blue": cls.blue,
            "Green": cls.green,
        }
        return presets.get(name, cls.default)()
