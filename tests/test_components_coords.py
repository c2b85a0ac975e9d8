from __future__ import annotations

import math

import pytest

from pdflayout.components import (
    Alignment,
    Position,
    Rotation,
    RotationQuadrant,
    Size,
    alignment_offset,
    bounding_box_offset_and_size,
    mm_to_pt,
    pixels_to_mm,
    pt_to_mm,
    rotation_quadrant,
)


def _close(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=1e-9, abs_tol=1e-9)


class TestValueTypes:
    def test_position_translation(self):
        assert Position(1, 2) + Position(3, 4) == Position(4, 6)
        assert Position(5, 5) - Position(2, 1) == Position(3, 4)

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError, match="4002"):
            Size(-1, 2)

    @pytest.mark.parametrize("degrees", [-180, -90, 0, 45.5, 90, 180])
    def test_rotation_in_range(self, degrees):
        assert Rotation(degrees).degrees == degrees

    @pytest.mark.parametrize("degrees", [-180.0001, 181, 360, float("nan")])
    def test_rotation_out_of_range_rejected(self, degrees):
        with pytest.raises(ValueError, match="4003"):
            Rotation(degrees)


class TestUnits:
    def test_mm_pt_roundtrip(self):
        assert _close(mm_to_pt(25.4), 72.0)
        assert _close(pt_to_mm(72.0), 25.4)

    def test_pixels_to_mm(self):
        # 300 px @ 300 DPI = 1 in = 25.4 mm；缩放 0.5 后减半
        assert _close(pixels_to_mm(300, 300), 25.4)
        assert _close(pixels_to_mm(300, 300, scale=0.5), 12.7)

    def test_pixels_to_mm_rejects_bad_dpi(self):
        with pytest.raises(ValueError, match="4004"):
            pixels_to_mm(10, 0)


class TestRotationQuadrant:
    @pytest.mark.parametrize(
        "degrees,expected",
        [
            (0, RotationQuadrant.NONE),
            (0.001, RotationQuadrant.FIRST),
            (90, RotationQuadrant.FIRST),
            (90.001, RotationQuadrant.SECOND),
            (180, RotationQuadrant.SECOND),
            (-0.001, RotationQuadrant.FOURTH),
            (-89.999, RotationQuadrant.FOURTH),
            (-90, RotationQuadrant.THIRD),
            (-180, RotationQuadrant.THIRD),
        ],
    )
    def test_boundaries(self, degrees, expected):
        assert rotation_quadrant(Rotation(degrees)) is expected


class TestBoundingBox:
    W, H = 40.0, 20.0

    def _bbox(self, degrees):
        return bounding_box_offset_and_size(Rotation(degrees), Size(self.W, self.H))

    def test_zero_rotation(self):
        offset, size = self._bbox(0)
        assert size == Size(self.W, self.H)
        assert offset == Position(0, self.H)

    @pytest.mark.parametrize("degrees", [90, -90])
    def test_quarter_turn_swaps_sides(self, degrees):
        _, size = self._bbox(degrees)
        assert _close(size.width, self.H)
        assert _close(size.height, self.W)

    @pytest.mark.parametrize("degrees", [180, -180])
    def test_half_turn_keeps_sides(self, degrees):
        _, size = self._bbox(degrees)
        assert _close(size.width, self.W)
        assert _close(size.height, self.H)

    def test_first_quadrant_offset(self):
        # 30°：bb_w = h sin + w cos，bb_h = w sin + h cos，offset = (h sin30, bb_h)
        offset, size = self._bbox(30)
        s, c = math.sin(math.radians(30)), math.cos(math.radians(30))
        assert _close(size.width, self.H * s + self.W * c)
        assert _close(size.height, self.W * s + self.H * c)
        assert _close(offset.x, self.H * s)
        assert _close(offset.y, size.height)

    def test_second_quadrant_offset(self):
        offset, size = self._bbox(120)
        a = math.radians(30)
        assert _close(size.width, self.W * math.sin(a) + self.H * math.cos(a))
        assert _close(size.height, self.W * math.cos(a) + self.H * math.sin(a))
        assert _close(offset.x, size.width)
        assert _close(offset.y, self.W * math.cos(a))

    def test_fourth_quadrant_offset(self):
        offset, size = self._bbox(-30)
        t = math.radians(30)
        assert _close(size.width, self.H * math.sin(t) + self.W * math.cos(t))
        assert _close(size.height, self.H * math.cos(t) + self.W * math.sin(t))
        assert offset.x == 0
        assert _close(offset.y, self.H * math.cos(t))

    def test_third_quadrant_offset(self):
        offset, size = self._bbox(-150)
        a = math.radians(30)
        assert _close(size.width, self.H * math.sin(a) + self.W * math.cos(a))
        assert _close(size.height, self.H * math.cos(a) + self.W * math.sin(a))
        assert _close(offset.x, self.W * math.cos(a))
        assert offset.y == 0

    @pytest.mark.parametrize("degrees", [1, 15, 45, 60, 89, 90, 91, 135, 150, 179, 180])
    def test_symmetry_with_negative_supplement(self, degrees):
        _, size = self._bbox(degrees)
        _, mirrored = self._bbox(-(180 - degrees))
        assert _close(size.width, mirrored.width)
        assert _close(size.height, mirrored.height)

    @pytest.mark.parametrize("degrees", [-180, -150, -120, -90, -60, -30, -1, 0, 1, 30, 60, 90, 120, 150, 180])
    def test_rotated_rectangle_fits_bounding_box_exactly(self, degrees):
        # 在 y 向上的坐标中：包围盒占 [0, bb_w] x [0, bb_h]，左下角 P = (off.x, bb_h - off.y)，
        # 以 P 为中心按正角度（逆时针）旋转原矩形，四个角应恰好贴合包围盒
        offset, size = self._bbox(degrees)
        px, py = offset.x, size.height - offset.y
        t = math.radians(degrees)
        ct, st = math.cos(t), math.sin(t)
        xs, ys = [], []
        for cx, cy in [(0, 0), (self.W, 0), (0, self.H), (self.W, self.H)]:
            xs.append(px + cx * ct - cy * st)
            ys.append(py + cx * st + cy * ct)
        tol = 1e-9
        assert min(xs) == pytest.approx(0, abs=tol)
        assert max(xs) == pytest.approx(size.width, abs=tol)
        assert min(ys) == pytest.approx(0, abs=tol)
        assert max(ys) == pytest.approx(size.height, abs=tol)


class TestAlignmentOffset:
    @pytest.mark.parametrize(
        "alignment,expected",
        [(Alignment.LEFT, 0), (Alignment.CENTER, 30), (Alignment.RIGHT, 60)],
    )
    def test_offsets(self, alignment, expected):
        assert alignment_offset(alignment, 40, 100) == Position(expected, 0)
