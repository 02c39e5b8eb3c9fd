import pytest

from PyQt6.QtCore import Qt, QEvent, QPointF
from PyQt6.QtGui import QColor, QMouseEvent
from PyQt6.QtWidgets import QApplication

from paint_canvas.core.coordinate import Coordinate
from paint_canvas.core.paint_session import SessionState
from paint_canvas.core.shapes import ShapeKind
from paint_canvas.core.style import StyleSpec
from paint_canvas.widgets.paint_canvas import PaintCanvas


YELLOW = QColor('yellow').name()

LEFT = Qt.MouseButton.LeftButton
NO_BUTTON = Qt.MouseButton.NoButton


def send_mouse(canvas, event_type, x, y, button=LEFT, buttons=LEFT):
    local = QPointF(x, y)
    global_pos = QPointF(canvas.mapToGlobal(local))
    event = QMouseEvent(event_type, local, global_pos, button, buttons,
                        Qt.KeyboardModifier.NoModifier)
    QApplication.sendEvent(canvas, event)


def press(canvas, x, y, button=LEFT):
    send_mouse(canvas, QEvent.Type.MouseButtonPress, x, y, button, button)


def move(canvas, x, y):
    send_mouse(canvas, QEvent.Type.MouseMove, x, y, NO_BUTTON, LEFT)


def release(canvas, x, y, button=LEFT):
    send_mouse(canvas, QEvent.Type.MouseButtonRelease, x, y, button, Qt.MouseButton.NoButton)


@pytest.fixture
def canvas(qapp):
    widget = PaintCanvas(style=StyleSpec('yellow', 'bevel', 5))
    widget.resize(400, 300)
    widget.show()
    qapp.processEvents()
    yield widget
    widget.close()


def test_surface_covers_widget(canvas):
    assert canvas.surface.is_attached
    assert canvas.surface.width >= 400
    assert canvas.surface.height >= 300


def test_drag_paints_segments(canvas):
    rendered = []
    canvas.shape_rendered.connect(rendered.append)

    press(canvas, 10, 10)
    move(canvas, 30, 10)
    move(canvas, 30, 30)
    release(canvas, 30, 30)

    assert rendered == ['segment', 'segment']
    assert canvas.surface.pixel_color(20, 10).name() == YELLOW
    assert canvas.surface.pixel_color(30, 20).name() == YELLOW
    assert canvas.session.state == SessionState.IDLE


def test_press_records_local_point(canvas):
    press(canvas, 42, 17)
    assert canvas.session.last_point == Coordinate(42, 17)
    release(canvas, 42, 17)


def test_move_without_press_paints_nothing(canvas):
    rendered = []
    canvas.shape_rendered.connect(rendered.append)

    move(canvas, 10, 10)
    move(canvas, 50, 50)
    assert rendered == []


def test_leave_ends_stroke(canvas):
    started, finished = [], []
    canvas.drawing_started.connect(lambda: started.append(True))
    canvas.drawing_finished.connect(lambda: finished.append(True))

    press(canvas, 10, 10)
    QApplication.sendEvent(canvas, QEvent(QEvent.Type.Leave))
    move(canvas, 50, 50)

    assert started == [True]
    assert finished == [True]
    assert not canvas.session.is_active
    assert canvas.surface.pixel_color(30, 30).name() != YELLOW


def test_dragging_outside_ends_stroke(canvas):
    rendered, finished = [], []
    canvas.shape_rendered.connect(rendered.append)
    canvas.drawing_finished.connect(lambda: finished.append(True))

    press(canvas, 10, 10)
    move(canvas, 500, 10)
    move(canvas, 20, 200)

    assert rendered == []
    assert finished == [True]
    assert not canvas.session.is_active
    assert canvas.surface.pixel_color(200, 10).name() != YELLOW
    assert canvas.surface.pixel_color(15, 100).name() != YELLOW


def test_right_button_does_not_start_stroke(canvas):
    press(canvas, 10, 10, button=Qt.MouseButton.RightButton)
    assert not canvas.session.is_active


def test_set_shape_kind(canvas):
    rendered = []
    canvas.shape_rendered.connect(rendered.append)
    canvas.set_shape_kind('circle')

    press(canvas, 100, 100)
    move(canvas, 120, 100)
    release(canvas, 120, 100)

    assert canvas.session.shape_kind == ShapeKind.CIRCLE
    assert rendered == ['circle']
    assert canvas.surface.pixel_color(120, 100).name() == YELLOW


def test_set_style_and_clear(canvas):
    canvas.set_style(StyleSpec('red', 'round', 6))
    press(canvas, 10, 50)
    move(canvas, 60, 50)
    release(canvas, 60, 50)
    assert canvas.surface.pixel_color(30, 50).name() == QColor('red').name()

    canvas.clear()
    assert canvas.surface.pixel_color(30, 50).name() == canvas.surface.background.name()


def test_press_on_unattached_surface_is_ignored(qapp):
    widget = PaintCanvas()
    widget.surface.release()
    press(widget, 10, 10)
    assert not widget.session.is_active
