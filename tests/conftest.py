"""
Shared fixtures for Paint Canvas tests.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from paint_canvas.config import Config
from paint_canvas.core.coordinate import Coordinate
from paint_canvas.surface.base import DrawingContext, DrawingSurface


class RecordingContext(DrawingContext):
    """Drawing context that records every attribute write and path command."""

    def __init__(self):
        self.calls = []
        self.entered = False
        self.exited = False
        self._line_width = 1.0
        self._stroke_style = 'black'
        self._line_join = 'miter'

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.exited = True
        return False

    @property
    def line_width(self):
        return self._line_width

    @line_width.setter
    def line_width(self, value):
        self._line_width = value
        self.calls.append(('line_width', value))

    @property
    def stroke_style(self):
        return self._stroke_style

    @stroke_style.setter
    def stroke_style(self, value):
        self._stroke_style = value
        self.calls.append(('stroke_style', value))

    @property
    def line_join(self):
        return self._line_join

    @line_join.setter
    def line_join(self, value):
        self._line_join = value
        self.calls.append(('line_join', value))

    def begin_path(self):
        self.calls.append(('begin_path',))

    def move_to(self, x, y):
        self.calls.append(('move_to', x, y))

    def line_to(self, x, y):
        self.calls.append(('line_to', x, y))

    def arc(self, x, y, radius, start_angle, end_angle):
        self.calls.append(('arc', x, y, radius, start_angle, end_angle))

    def rect(self, x, y, width, height):
        self.calls.append(('rect', x, y, width, height))

    def stroke(self):
        self.calls.append(('stroke',))


class RecordingSurface(DrawingSurface):
    """Surface handing out a fresh RecordingContext per render call."""

    def __init__(self, attached=True):
        self.attached = attached
        self.contexts = []

    @property
    def origin(self):
        return Coordinate(0.0, 0.0)

    def get_context(self):
        if not self.attached:
            return None
        context = RecordingContext()
        self.contexts.append(context)
        return context

    @property
    def render_count(self):
        return len(self.contexts)


@pytest.fixture
def recording_surface():
    return RecordingSurface()


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def user_data_dir(tmp_path, monkeypatch):
    """Point Config at a temporary user data directory."""
    data_dir = tmp_path / "user_data"
    data_dir.mkdir()
    monkeypatch.setattr(Config, 'get_user_data_dir', classmethod(lambda cls: data_dir))
    return data_dir
