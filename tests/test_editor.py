import math
import random

import pytest

from circlepick.editor import CircleEditor
from circlepick.geometry import Point

WINDOW_POINTS = [(20, 70), (80, 70), (50, 120)]


def make_editor(seed=1):
    editor = CircleEditor(200, 100, 50, random.Random(seed))
    editor.reset()
    return editor


def place_three(editor):
    for x, y in WINDOW_POINTS:
        editor.button_down(x, y)
        editor.button_up(x, y)


def test_reset_prepares_blank_canvas():
    editor = make_editor()
    assert editor.started is True
    assert set(editor.image.pixels) == {255}
    assert editor.rect == (0, 50, 200, 150)
    assert editor.points == []


def test_button_down_places_point_in_canvas_coordinates():
    editor = make_editor()
    editor.button_down(20, 70)
    assert editor.points == [Point(20, 20)]
    assert editor.sizes == [int(editor.thickness)]
    assert editor.colors == [editor.color]
    assert editor.image[20, 20] == editor.color


def test_button_down_before_reset_does_nothing():
    editor = CircleEditor(200, 100, 50, random.Random(0))
    editor.button_down(20, 70)
    assert editor.points == []


def test_button_down_outside_canvas_ignored():
    editor = make_editor()
    editor.button_down(20, 10)
    editor.button_down(250, 70)
    assert editor.points == []


def test_third_point_draws_circle():
    editor = make_editor()
    place_three(editor)
    assert len(editor.points) == 3
    assert editor.circle.valid
    for p in editor.points:
        d = math.hypot(p.x - editor.circle.cx, p.y - editor.circle.cy)
        assert d == pytest.approx(editor.circle.radius)


def test_fourth_click_adds_nothing():
    editor = make_editor()
    place_three(editor)
    editor.button_down(150, 130)
    assert len(editor.points) == 3


def test_drag_moves_point():
    editor = make_editor()
    place_three(editor)
    editor.button_down(20, 70)
    assert editor.dragging is True
    assert editor.drag_index == 0
    editor.mouse_move(25, 72)
    assert editor.points[0] == Point(25, 22)
    assert (editor.now_x, editor.now_y) == (25, 22)
    editor.button_up(25, 72)
    assert editor.dragging is False
    assert editor.drag_index == -1
    editor.mouse_move(40, 90)
    assert editor.points[0] == Point(25, 22)


def test_mouse_move_reports_hovered_point():
    editor = make_editor()
    place_three(editor)
    editor.mouse_move(80, 70)
    assert (editor.hover_x, editor.hover_y) == (80, 20)
    editor.mouse_move(150, 140)
    assert (editor.hover_x, editor.hover_y) == (0, 0)


def test_mouse_move_before_reset_changes_nothing():
    editor = CircleEditor(200, 100, 50, random.Random(0))
    editor.mouse_move(30, 80)
    assert (editor.now_x, editor.now_y) == (0, 0)


def test_drag_reset_clears_points_and_canvas():
    editor = make_editor()
    place_three(editor)
    editor.drag_reset()
    assert editor.points == []
    assert set(editor.image.pixels) == {255}


def test_random_int_within_bounds():
    editor = make_editor()
    values = {editor.random_int(5, 30) for _ in range(500)}
    assert min(values) >= 5 and max(values) <= 30


def test_random_position_in_top_left_quarter():
    editor = make_editor()
    for _ in range(200):
        p = editor.random_position()
        assert 0 <= p.x < 100 and 0 <= p.y < 50


def test_can_randomize_requires_three_points():
    editor = make_editor()
    editor.button_down(20, 70)
    assert editor.can_randomize() is False
    assert editor.run_random(3, 0.0) is False


def test_randomize_updates_all_points():
    editor = make_editor(seed=7)
    place_three(editor)
    editor.randomize()
    assert all(5 <= s <= 30 for s in editor.sizes)
    assert all(0 <= c <= 250 for c in editor.colors)
    assert 0 <= editor.circle_color <= 250
    for p, size, color in zip(editor.points, editor.sizes, editor.colors):
        assert editor.image[p.x, p.y] in (color, editor.circle_color)


def test_run_random_calls_back_each_step():
    editor = make_editor(seed=3)
    place_three(editor)
    seen = []
    assert editor.run_random(4, 0.0, lambda ed: seen.append(list(ed.points))) is True
    assert len(seen) == 4
    assert editor.running is False


def test_reset_ignored_while_running():
    editor = make_editor(seed=3)
    place_three(editor)

    def try_reset(ed):
        ed.reset()
        assert len(ed.points) == 3

    editor.run_random(2, 0.0, try_reset)
    assert len(editor.points) == 3


def test_same_seed_same_run():
    a, b = make_editor(seed=11), make_editor(seed=11)
    place_three(a)
    place_three(b)
    a.run_random(3, 0.0)
    b.run_random(3, 0.0)
    assert a.points == b.points
    assert a.image.pixels == b.image.pixels