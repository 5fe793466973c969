"""
Tests for mapping puddle geometry onto the camera.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from foldergraph_core.domain.models import Camera, Point, ViewportTransform


class TestViewportTransform:
    """Test ViewportTransform."""

    def test_identity(self):
        t = ViewportTransform.identity()
        assert t.map_point(Point(3, 4)) == Point(3, 4)

    def test_scale_blends_towards_target(self):
        t = ViewportTransform.from_camera(Camera(scale=1.0, target_scale=2.0))
        assert t.scale == pytest.approx(1.15)

    def test_keyboard_pan_anticipates_velocity(self):
        camera = Camera(pan_x=10, pan_y=20, pan_vx=0.06, pan_vy=-0.12)
        t = ViewportTransform.from_camera(camera)

        assert t.x == pytest.approx(11)
        assert t.y == pytest.approx(18)

    def test_mouse_pan_follows_pointer(self):
        camera = Camera(pan_x=10, pan_y=20, mouse_x=50, mouse_y=60, panning=True)
        t = ViewportTransform.from_camera(camera, mouse_x=40, mouse_y=65)

        assert (t.x, t.y) == (20, 15)

    def test_map_and_unmap(self):
        t = ViewportTransform(100, 50, 2.0)
        assert t.map_point(Point(10, -5)) == Point(120, 40)
        assert t.unmap_point(Point(120, 40)) == Point(10, -5)

    def test_unmap_with_zero_scale(self):
        assert ViewportTransform(1, 1, 0).unmap_point(Point(5, 5)) == Point(0, 0)


class TestCameraAdvance:
    """Test stepping the camera one frame."""

    def test_keyboard_pan_moves_once_per_frame(self):
        camera = Camera(pan_x=10, pan_y=20, pan_vx=0.06, pan_vy=-0.12)

        t = camera.advance(0, 0)

        assert (t.x, t.y) == (pytest.approx(11), pytest.approx(18))
        assert (camera.pan_x, camera.pan_y) == (t.x, t.y)

        t = camera.advance(0, 0)
        assert (t.x, t.y) == (pytest.approx(12), pytest.approx(16))

    def test_scale_eases_once_per_frame(self):
        camera = Camera(scale=1.0, target_scale=2.0)

        assert camera.advance(0, 0).scale == pytest.approx(1.15)
        assert camera.scale == pytest.approx(1.15)
        assert camera.advance(0, 0).scale == pytest.approx(0.85 * 1.15 + 0.3)

    def test_mouse_pan_leaves_pan_to_the_pointer(self):
        camera = Camera(pan_x=10, pan_y=20, mouse_x=50, mouse_y=60, panning=True)

        t = camera.advance(40, 65)

        assert (t.x, t.y) == (20, 15)
        assert (camera.pan_x, camera.pan_y) == (10, 20)
