"""Visual theme constants for the fusion chess board."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # normal move / capture targets
    highlight_fusion: QColor  # fusion targets
    highlight_check: QColor  # king in check
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_to=QColor(255, 235, 59, 130),  # yellow
            highlight_fusion=QColor(255, 105, 180, 140),  # pink
            highlight_check=QColor(255, 0, 0, 120),  # red transparent
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
            white_piece=QColor(250, 250, 250),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(255, 235, 59, 130),
            highlight_fusion=QColor(255, 105, 180, 140),
            highlight_check=QColor(255, 0, 0, 120),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
            white_piece=QColor(250, 250, 250),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Theme for a settings name; unknown names fall back to Classic."""
        themes = {
            "Classic": cls.default,
            "Blue": cls.blue,
        }
        return themes.get(name, cls.default)()


THEME_NAMES: tuple[str, ...] = ("Classic", "Blue")
