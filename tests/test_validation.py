#!/usr/bin/env python3
"""
Tests for the validation module.
"""

import pytest

from conftest import build_map
from map_colorer.core.geometry import Rect
from map_colorer.core.validation import (
    MAX_SOURCE_LENGTH,
    ValidationError,
    get_standardized_response,
    validate_coloring,
    validate_node_limit,
    validate_rect,
    validate_region_name,
    validate_source,
)


class TestValidation:
    """Tests for the validation helpers."""

    def test_validate_region_name(self):
        validate_region_name("France")
        validate_region_name("France", existing={"Spain"})

        with pytest.raises(ValidationError):
            validate_region_name("")
        with pytest.raises(ValidationError):
            validate_region_name(42)
        with pytest.raises(ValidationError):
            validate_region_name("Spain", existing={"Spain"})

    def test_validate_rect(self):
        validate_rect(Rect(0, 0, 0, 0))
        validate_rect(Rect(-5, -5, 5, 5))

        with pytest.raises(ValidationError):
            validate_rect(Rect(1, 0, 0, 5))
        with pytest.raises(ValidationError):
            validate_rect(Rect(0, 6, 5, 5))

    def test_validate_source(self):
        validate_source("")
        validate_source("A 0 0 1 1")

        with pytest.raises(ValidationError):
            validate_source(None)
        with pytest.raises(ValidationError):
            validate_source("x" * (MAX_SOURCE_LENGTH + 1))

    def test_validate_node_limit(self):
        validate_node_limit(None)
        validate_node_limit(1)

        with pytest.raises(ValidationError):
            validate_node_limit(0)
        with pytest.raises(ValidationError):
            validate_node_limit("10")
        with pytest.raises(ValidationError):
            validate_node_limit(True)

    def test_validate_coloring(self, triangle_map):
        assert validate_coloring(triangle_map) == [
            "Region R0 is uncolored",
            "Region R1 is uncolored",
            "Region R2 is uncolored",
        ]

        for region, color in zip(triangle_map, (1, 1, 5)):
            region.color = color
        assert validate_coloring(triangle_map) == [
            "Region R2 has out-of-range color 5",
            "Neighbors R0 and R1 share a color",
        ]

        triangle_map[1].color = 2
        triangle_map[2].color = 3
        assert validate_coloring(triangle_map) == []

    def test_validate_coloring_budget(self):
        region_map = build_map([("A", (0, 0, 1, 1))])
        region_map[0].color = 3
        assert validate_coloring(region_map, max_colors=2) == [
            "Region A has out-of-range color 3"
        ]

    def test_standardized_response(self):
        assert get_standardized_response(True, "ok") == {"message": "ok", "success": True}
        response = get_standardized_response(False, "bad", error="boom", extra=1)
        assert response == {"message": "bad", "success": False, "error": "boom", "extra": 1}
