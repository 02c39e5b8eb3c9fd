"""
Global configuration for Paint Canvas
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Final

logger = logging.getLogger(__name__)


class Config:
    """Central configuration class for all application settings"""

    # Application metadata
    APP_NAME: Final[str] = "Paint Canvas"
    APP_VERSION: Final[str] = "1.0.0"
    APP_AUTHOR: Final[str] = "Paint Canvas"

    # Paths
    APP_ROOT: Final[Path] = Path(__file__).parent
    SETTINGS_FILE_NAME: Final[str] = "settings.json"
    LOG_FOLDER_NAME: Final[str] = "logs"

    # Default stroke style
    DEFAULT_STROKE_COLOR: Final[str] = "yellow"
    DEFAULT_LINE_JOIN: Final[str] = "bevel"  # "miter", "round" or "bevel"
    DEFAULT_LINE_WIDTH: Final[float] = 5

    # Default shape drawn per stroke increment
    DEFAULT_SHAPE_KIND: Final[str] = "segment"  # "segment", "circle" or "square"

    # Surface settings
    BACKGROUND_COLOR: Final[str] = "#202020"
    ANTIALIASING: Final[bool] = True

    # Window settings
    MIN_WINDOW_WIDTH: Final[int] = 320
    MIN_WINDOW_HEIGHT: Final[int] = 240

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """
        Get user data directory.

        Uses system AppData/Local (Windows), Application Support (macOS)
        or .local/share (Linux) so settings persist across updates.
        A 'portable.txt' file next to the package switches to a local
        'data' folder instead.
        """
        portable_flag = cls.APP_ROOT.parent / 'portable.txt'
        if portable_flag.exists():
            user_dir = cls.APP_ROOT.parent / 'data'
        elif sys.platform == 'win32':
            base_path = Path(os.environ.get('LOCALAPPDATA', os.path.expanduser('~')))
            user_dir = base_path / 'PaintCanvas'
        elif sys.platform == 'darwin':
            user_dir = Path.home() / 'Library' / 'Application Support' / 'PaintCanvas'
        else:
            user_dir = Path.home() / '.local' / 'share' / 'PaintCanvas'

        user_dir.mkdir(parents=True, exist_ok=True)
        return user_dir

    @classmethod
    def get_log_dir(cls) -> Path:
        """Get the folder log files are written to."""
        return cls.get_user_data_dir() / cls.LOG_FOLDER_NAME

    @classmethod
    def get_settings_file(cls) -> Path:
        """Get settings JSON file path"""
        return cls.get_user_data_dir() / cls.SETTINGS_FILE_NAME

    @classmethod
    def get_default_settings(cls) -> dict:
        return {
            'stroke_color': cls.DEFAULT_STROKE_COLOR,
            'line_join': cls.DEFAULT_LINE_JOIN,
            'line_width': cls.DEFAULT_LINE_WIDTH,
            'shape_kind': cls.DEFAULT_SHAPE_KIND,
        }

    @classmethod
    def load_paint_settings(cls) -> dict:
        """
        Load paint settings

        Returns:
            dict: Settings with keys:
                - stroke_color: str
                - line_join: str ('miter', 'round' or 'bevel')
                - line_width: float
                - shape_kind: str ('segment', 'circle' or 'square')
        """
        settings = cls.get_default_settings()
        try:
            settings_file = cls.get_settings_file()
            if settings_file.exists():
                with open(settings_file, 'r', encoding='utf-8') as f:
                    stored = json.load(f)
                if isinstance(stored, dict):
                    settings.update({k: v for k, v in stored.items() if k in settings})
                else:
                    logger.warning(f"Ignoring malformed settings file: {settings_file}")
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read settings: {e}")

        return settings

    @classmethod
    def save_paint_settings(cls, settings: dict) -> bool:
        """
        Save paint settings, merged over the current stored values

        Args:
            settings: Partial or complete settings dict

        Returns:
            True if saved successfully
        """
        try:
            merged = cls.load_paint_settings()
            merged.update(settings)
            with open(cls.get_settings_file(), 'w', encoding='utf-8') as f:
                json.dump(merged, f, indent=2)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Could not save settings: {e}")
            return False

    @classmethod
    def get_default_style(cls):
        """Build the built-in default StyleSpec."""
        from .core.style import StyleSpec
        return StyleSpec(
            stroke_color=cls.DEFAULT_STROKE_COLOR,
            line_join=cls.DEFAULT_LINE_JOIN,
            line_width=cls.DEFAULT_LINE_WIDTH,
        )

    @classmethod
    def load_style(cls):
        """
        Build the StyleSpec from stored settings.

        Falls back to the default style if the stored values are invalid.
        """
        from .core.style import StyleSpec
        try:
            return StyleSpec.from_dict(cls.load_paint_settings())
        except ValueError as e:
            logger.warning(f"Invalid stored style, using defaults: {e}")
            return cls.get_default_style()

    @classmethod
    def load_shape_kind(cls):
        """Get the stored ShapeKind, falling back to the default."""
        from .core.shapes import ShapeKind
        settings = cls.load_paint_settings()
        try:
            return ShapeKind.from_value(settings['shape_kind'])
        except ValueError as e:
            logger.warning(f"Invalid stored shape kind, using default: {e}")
            return ShapeKind.from_value(cls.DEFAULT_SHAPE_KIND)


__all__ = ['Config']
