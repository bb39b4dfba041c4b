import unittest

from ahma_studio.metrics import (
    BEARISH,
    BULLISH,
    CrossSignal,
    IndicatorSnapshot,
    build_snapshot,
    find_latest_cross,
    format_price,
    format_signed,
    format_snapshot,
    resolve_labels,
)


class TestCrossDetection(unittest.TestCase):
    def test_bullish_cross(self):
        cross = find_latest_cross([1.0, 2.0, 3.0, 4.0], [None, 2.5, 2.5, 2.5])
        self.assertEqual(cross, CrossSignal(kind=BULLISH, index=2))

    def test_bearish_cross_on_touch(self):
        cross = find_latest_cross([5.0, 4.0, 3.0], [4.0, 4.0, 4.0])
        self.assertEqual(cross, CrossSignal(kind=BEARISH, index=1))

    def test_latest_cross_wins(self):
        prices = [1.0, 3.0, 1.0, 3.0]
        ahma = [2.0, 2.0, 2.0, 2.0]
        self.assertEqual(find_latest_cross(prices, ahma), CrossSignal(kind=BULLISH, index=3))

    def test_absent_indicator_values_are_skipped(self):
        self.assertIsNone(find_latest_cross([1.0, 3.0, 1.0], [None, None, None]))
        self.assertIsNone(find_latest_cross([1.0, 3.0], [2.0, None]))
        self.assertIsNone(find_latest_cross([], []))


class TestSnapshot(unittest.TestCase):
    def test_labels_fall_back_to_points(self):
        self.assertEqual(resolve_labels(["a", "b"], 2), ["a", "b"])
        self.assertEqual(resolve_labels(["a"], 2), ["Point 1", "Point 2"])
        self.assertEqual(resolve_labels(None, 1), ["Point 1"])

    def test_snapshot_values(self):
        snapshot = build_snapshot(
            ["d1", "d2", "d3", "d4"],
            [1.0, 2.0, 3.0, 4.0],
            [None, 2.5, 2.5, 3.0],
        )
        self.assertEqual(snapshot.latest_price, 4.0)
        self.assertEqual(snapshot.latest_ahma, 3.0)
        self.assertAlmostEqual(snapshot.slope, 0.5)
        self.assertAlmostEqual(snapshot.spread_pct, 100.0 / 3.0)
        self.assertEqual(snapshot.cross, CrossSignal(kind=BULLISH, index=2))
        self.assertEqual(snapshot.cross_label, "d3")
        self.assertEqual(snapshot.bars_since_cross, 1)

    def test_missing_previous_ahma_has_no_slope(self):
        snapshot = build_snapshot(None, [100.0, 102.0], [None, 101.0])
        self.assertIsNone(snapshot.slope)
        self.assertAlmostEqual(snapshot.spread_pct, 100.0 / 101.0)
        self.assertIsNone(snapshot.cross)

    def test_zero_ahma_has_no_spread(self):
        snapshot = build_snapshot(None, [1.0, 2.0], [0.0, 0.0])
        self.assertIsNone(snapshot.spread_pct)
        self.assertEqual(snapshot.slope, 0.0)

    def test_empty_series(self):
        self.assertEqual(build_snapshot([], [], []), IndicatorSnapshot())


class TestFormatting(unittest.TestCase):
    def test_number_formats(self):
        self.assertEqual(format_price(1234.5), "$1,234.50")
        self.assertEqual(format_price(None), "-")
        self.assertEqual(format_signed(0.0), "+0.00")
        self.assertEqual(format_signed(-1.234), "-1.23")
        self.assertEqual(format_signed(2.5, suffix="%"), "+2.50%")

    def test_format_snapshot(self):
        snapshot = build_snapshot(
            ["d1", "d2", "d3", "d4"],
            [1.0, 2.0, 3.0, 4.0],
            [None, 2.5, 2.5, 3.0],
        )
        lines = format_snapshot(snapshot)
        self.assertEqual(lines[0], "Last Close: $4.00")
        self.assertEqual(lines[1], "Last AHMA: $3.00")
        self.assertEqual(lines[2], "AHMA Slope: +0.50")
        self.assertEqual(lines[3], "Price vs AHMA: +33.33%")
        self.assertEqual(lines[4], "Recent Signal: Bullish crossover on d3")
        self.assertEqual(lines[5], "Bars Since Signal: 1 bars")

    def test_format_empty_snapshot(self):
        lines = format_snapshot(IndicatorSnapshot())
        self.assertIn("Recent Signal: No crossover detected", lines)
        self.assertIn("Bars Since Signal: -", lines)


if __name__ == "__main__":
    unittest.main()
