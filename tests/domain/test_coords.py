# ABOUTME: Tests for world to map coordinate conversion
# ABOUTME: Validates known reference points, scaling and determinism

import pytest

from triad_ingest.domain.coords import convert_coord_to_human_readable, convert_map_position


class TestConvertCoord:
    """Test single axis conversion."""

    def test_map_center(self):
        """Test that world origin lands in the middle of a 1.0 scale map."""
        assert convert_coord_to_human_readable(0.0, 0.0, 100) == pytest.approx(21.5)

    def test_map_edges(self):
        """Test both edges of a 1.0 scale map."""
        assert convert_coord_to_human_readable(-1024.0, 0.0, 100) == pytest.approx(1.0)
        assert convert_coord_to_human_readable(1024.0, 0.0, 100) == pytest.approx(42.0)

    def test_offset_and_scale(self):
        """Test a scaled map with an offset."""
        # scale 2, shifted (100 - 10) * 2 = 180
        expected = (41.0 / 2.0) * ((180.0 + 1024.0) / 2048.0) + 1
        assert convert_coord_to_human_readable(100.0, -10.0, 200) == pytest.approx(expected)
        assert expected == pytest.approx(13.0517578125)

    def test_deterministic(self):
        """Test that repeated calls give identical results."""
        results = {convert_coord_to_human_readable(123.456, -7.0, 95) for _ in range(50)}

        assert len(results) == 1


class TestConvertMapPosition:
    """Test full placement conversion."""

    def test_uses_x_and_z_axes(self):
        """Test that raw z becomes map y and raw y is ignored."""
        x, y = convert_map_position((100.0, 999.0, -200.0), -10, 20, 200)

        assert x == pytest.approx(13.0517578125)
        assert y == pytest.approx(7.646484375)

    def test_height_does_not_matter(self):
        """Test that changing raw height leaves the map position alone."""
        low = convert_map_position((5.0, 0.0, 5.0), 0, 0, 100)
        high = convert_map_position((5.0, 500.0, 5.0), 0, 0, 100)

        assert low == high
