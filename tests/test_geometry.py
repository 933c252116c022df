"""Tests for viewport height arithmetic and resize bookkeeping."""

from __future__ import annotations

import unittest

from lazypick.geometry import Geometry, compute_viewport_height


class ComputeViewportHeightTests(unittest.TestCase):
    def test_reserves_status_row_without_prompt(self) -> None:
        self.assertEqual(compute_viewport_height(24, False), 23)

    def test_reserves_prompt_and_status_rows(self) -> None:
        self.assertEqual(compute_viewport_height(24, True), 22)

    def test_small_terminal_can_go_non_positive(self) -> None:
        self.assertEqual(compute_viewport_height(2, True), 0)
        self.assertEqual(compute_viewport_height(1, True), -1)


class GeometryTests(unittest.TestCase):
    def test_rows_without_prompt(self) -> None:
        geometry = Geometry(80, 10)
        self.assertIsNone(geometry.prompt_row)
        self.assertEqual(geometry.top_row, 0)
        self.assertEqual(geometry.viewport_height, 9)
        self.assertEqual(geometry.bottom_row, 8)
        self.assertEqual(geometry.status_row, 9)
        self.assertFalse(geometry.degenerate)

    def test_rows_with_prompt(self) -> None:
        geometry = Geometry(80, 10, has_prompt=True)
        self.assertEqual(geometry.prompt_row, 0)
        self.assertEqual(geometry.top_row, 1)
        self.assertEqual(geometry.viewport_height, 8)
        self.assertEqual(geometry.bottom_row, 8)

    def test_degenerate_terminal_clamps_viewport_to_one_row(self) -> None:
        geometry = Geometry(80, 2, has_prompt=True)
        self.assertTrue(geometry.degenerate)
        self.assertEqual(geometry.viewport_height, 1)
        self.assertEqual(geometry.bottom_row, geometry.top_row)

    def test_on_resize_updates_size_and_derived_height(self) -> None:
        geometry = Geometry(80, 10)
        geometry.on_resize(40, 5)
        self.assertEqual((geometry.width, geometry.height), (40, 5))
        self.assertEqual(geometry.viewport_height, 4)

    def test_sizes_are_kept_positive(self) -> None:
        geometry = Geometry(0, -3)
        self.assertEqual((geometry.width, geometry.height), (1, 1))
        geometry.on_resize(-1, 0)
        self.assertEqual((geometry.width, geometry.height), (1, 1))


if __name__ == "__main__":
    unittest.main()
