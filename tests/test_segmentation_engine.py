import numpy as np
import pytest

from bgremover.models.segmentation_engine import SegmentationEngine
from bgremover.models.thresholds import SegmentationThresholds
from bgremover.repositories.segmentation_repository import SegmentationRepository

from conftest import make_rgba


@pytest.fixture
def engine():
    return SegmentationEngine()


class TestLuminance:

    def test_weights(self, engine):
        arr = make_rgba(1, 1, (100, 200, 50))
        assert engine.luminance(arr)[0, 0] == pytest.approx(0.3 * 100 + 0.59 * 200 + 0.11 * 50)

    def test_white_is_255(self, engine):
        arr = make_rgba(2, 2, (255, 255, 255))
        assert np.allclose(engine.luminance(arr), 255.0)


class TestEdgeDetection:

    def test_vertical_boundary_marks_both_sides(self, engine, split_array):
        edges = engine.detect_edges(split_array)
        assert edges[1:-1, 4].all()
        assert edges[1:-1, 5].all()

    def test_flat_regions_are_not_edges(self, engine, split_array):
        edges = engine.detect_edges(split_array)
        assert not edges[:, 1:4].any()
        assert not edges[:, 6:9].any()

    def test_border_never_marked(self, engine, split_array):
        edges = engine.detect_edges(split_array)
        assert not edges[0, :].any()
        assert not edges[-1, :].any()
        assert not edges[:, 0].any()
        assert not edges[:, -1].any()

    @pytest.mark.parametrize("width,height", [(1, 1), (2, 7), (7, 2), (2, 2)])
    def test_tiny_images_have_no_edges(self, engine, width, height):
        arr = make_rgba(width, height, (0, 0, 0))
        arr[0, 0, :3] = 255
        edges = engine.detect_edges(arr)
        assert edges.shape == (height, width)
        assert not edges.any()

    def test_threshold_is_configurable(self):
        # Step of 10 luminance units → Sobel magnitude of about 40
        arr = make_rgba(3, 3, (0, 0, 0))
        arr[:, 2, :3] = 10
        above = SegmentationEngine(SegmentationThresholds(edge_threshold=41)).detect_edges(arr)
        below = SegmentationEngine(SegmentationThresholds(edge_threshold=39)).detect_edges(arr)
        assert not above[1, 1]
        assert below[1, 1]


class TestColourRules:

    @pytest.mark.parametrize("rgb,expected", [
        ((255, 255, 255), True),    # light/flat
        ((0, 0, 0), False),         # black
        ((0, 255, 0), False),       # pure green: B not > 100
        ((0, 200, 200), True),      # blue-green screen
        ((30, 120, 240), True),     # blue screen
        ((150, 120, 240), False),   # R not below G
        ((160, 160, 165), True),    # neutral gray
        ((140, 140, 140), False),   # gray too dark
        ((229, 211, 220), True),    # brightness 220, variance 18
    ])
    def test_loose_rule(self, engine, rgb, expected):
        assert bool(engine.loose_background(make_rgba(1, 1, rgb))[0, 0]) is expected

    @pytest.mark.parametrize("rgb,expected", [
        ((255, 255, 255), True),
        ((229, 211, 220), False),
        ((0, 200, 200), False),
        ((245, 240, 250), True),
    ])
    def test_strict_rule(self, engine, rgb, expected):
        assert bool(engine.strict_background(make_rgba(1, 1, rgb))[0, 0]) is expected

    def test_no_uint8_wraparound(self, engine):
        # R - G would wrap in uint8 arithmetic
        arr = make_rgba(1, 1, (10, 250, 250))
        brightness, variance = engine.brightness_and_variance(arr)
        assert variance[0, 0] == 240
        assert brightness[0, 0] == pytest.approx(170.0)


class TestSegmentationRepository:

    def test_edge_pixels_use_strict_rule(self, split_array):
        split_array[5, 5, :3] = (229, 211, 220)
        mask = SegmentationRepository().retrieve_mask(split_array)
        assert not mask[5, 5]

    def test_non_edge_pixels_use_loose_rule(self, split_array):
        split_array[5, 8, :3] = (229, 211, 220)
        repo = SegmentationRepository()
        assert not repo.retrieve_edges(split_array)[5, 8]
        assert repo.retrieve_mask(split_array)[5, 8]
