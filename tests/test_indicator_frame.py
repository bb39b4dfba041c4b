from __future__ import annotations

import os
import tempfile
import unittest

import polars as pl

from ahma_studio.compute import FRAME_COLUMNS, indicator_frame, write_indicator_frame
from ahma_studio.indicators import AhmaResult, calculate_ahma


class TestIndicatorFrame(unittest.TestCase):
    def test_frame_columns_and_nulls(self):
        result = AhmaResult(hma=[None, 1.5, 2.0], ahma=[None, 1.5, 1.8])
        frame = indicator_frame(["a", "b", "c"], [1.0, 2.0, 3.0], result)

        self.assertEqual(tuple(frame.columns), FRAME_COLUMNS)
        self.assertEqual(frame.height, 3)
        self.assertEqual(frame["hma"].null_count(), 1)
        self.assertEqual(frame["ahma"].to_list(), [None, 1.5, 1.8])
        self.assertEqual(frame.schema["close"], pl.Float64)

    def test_mismatched_labels_fall_back_to_points(self):
        result = calculate_ahma([1.0, 2.0])
        frame = indicator_frame(["only-one"], [1.0, 2.0], result)
        self.assertEqual(frame["label"].to_list(), ["Point 1", "Point 2"])
        self.assertEqual(frame["hma"].null_count(), 2)

    def test_write_csv_and_parquet(self):
        prices = [100.0 + (idx % 7) for idx in range(40)]
        frame = indicator_frame(None, prices, calculate_ahma(prices, {"hull_length": 4}))

        with tempfile.TemporaryDirectory() as tmpdir:
            csv_path = write_indicator_frame(frame, os.path.join(tmpdir, "nested", "out.csv"))
            parquet_path = write_indicator_frame(frame, os.path.join(tmpdir, "out.parquet"))

            from_csv = pl.read_csv(csv_path)
            from_parquet = pl.read_parquet(parquet_path)

        self.assertEqual(from_csv.height, 40)
        self.assertEqual(from_csv.columns, list(FRAME_COLUMNS))
        self.assertEqual(from_parquet["ahma"].to_list(), frame["ahma"].to_list())


if __name__ == "__main__":
    unittest.main()
