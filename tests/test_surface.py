"""Tests for the in-memory surface and axis accessors."""

import pytest

from cropme.surface import HORIZONTAL, VERTICAL, ViewSurface


def test_hit_rect_at_unit_scale_matches_position():
    surface = ViewSurface(200, 100, x=10, y=20)
    rect = surface.hit_rect()
    assert rect.left() == pytest.approx(10)
    assert rect.top() == pytest.approx(20)
    assert rect.width() == pytest.approx(200)
    assert rect.height() == pytest.approx(100)


def test_hit_rect_scales_about_center():
    """Scaling keeps the centre fixed and grows every edge equally."""
    surface = ViewSurface(100, 100, x=0, y=60, scale=3.0)
    rect = surface.hit_rect()
    assert rect.left() == pytest.approx(-100)
    assert rect.top() == pytest.approx(-40)
    assert rect.right() == pytest.approx(200)
    assert rect.bottom() == pytest.approx(260)
    assert rect.center().x() == pytest.approx(50)
    assert rect.center().y() == pytest.approx(110)


def test_axis_accessors_read_and_write_their_own_axis():
    surface = ViewSurface(200, 100, x=1, y=2)

    HORIZONTAL.set_position(surface, 15)
    assert surface.x() == 15
    assert surface.y() == 2
    assert HORIZONTAL.get_extent(surface) == 200

    VERTICAL.set_position(surface, -7)
    assert VERTICAL.get_position(surface) == -7
    assert surface.x() == 15
    assert VERTICAL.get_extent(surface) == 100


def test_axis_accessor_edges():
    rect = ViewSurface(200, 100, x=5, y=10).hit_rect()
    assert HORIZONTAL.near_edge(rect) == pytest.approx(5)
    assert HORIZONTAL.far_edge(rect) == pytest.approx(205)
    assert VERTICAL.near_edge(rect) == pytest.approx(10)
    assert VERTICAL.far_edge(rect) == pytest.approx(110)


def test_on_changed_callback_receives_position():
    calls = []
    surface = ViewSurface(10, 10, on_changed=lambda x, y: calls.append((x, y)))
    surface.set_x(3)
    surface.set_y(4)
    assert calls == [(3.0, 0.0), (3.0, 4.0)]


def test_detach():
    surface = ViewSurface(10, 10)
    assert surface.is_attached()
    surface.detach()
    assert not surface.is_attached()
