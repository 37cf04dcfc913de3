from __future__ import annotations

import math
import threading
import unittest

import numpy as np

from lookuptable import (
    DuplicateAbscissaError,
    EmptyTableError,
    NonFiniteValueError,
    Table1D,
    TableConfig,
    TableConstructionError,
)


class TestTable1DEvaluate(unittest.TestCase):
    def setUp(self) -> None:
        self.line = Table1D([(0.0, 0.0), (10.0, 100.0)])
        self.wavy = Table1D.from_arrays([1.0, 2.0, 7.0, 9.0, 13.0, 20.0], [8.0, 4.0, 6.0, 10.0, 3.0, 2.0])

    def test_midpoint_is_interpolated(self) -> None:
        self.assertEqual(self.line.evaluate(5.0), 50.0)

    def test_below_range_clamps_to_first_sample(self) -> None:
        self.assertEqual(self.line.evaluate(-5.0), 0.0)
        self.assertEqual(self.wavy.evaluate(-1.0e9), 8.0)

    def test_above_range_clamps_to_last_sample(self) -> None:
        self.assertEqual(self.line.evaluate(15.0), 100.0)
        self.assertEqual(self.wavy.evaluate(1.0e9), 2.0)

    def test_stored_samples_are_returned_exactly(self) -> None:
        xs = [0.1, 0.7, 1.3, 2.9, 3.3]
        ys = [math.sin(x) * 1.0e3 / 7.0 for x in xs]
        table = Table1D.from_arrays(xs, ys)
        for x, y in zip(xs, ys):
            self.assertEqual(table.evaluate(x), y)

    def test_interpolates_between_neighbours(self) -> None:
        self.assertAlmostEqual(self.wavy.evaluate(8.0), 8.0, places=12)
        self.assertAlmostEqual(self.wavy.evaluate(4.5), 5.0, places=12)
        self.assertAlmostEqual(self.wavy.evaluate(16.5), 2.5, places=12)

    def test_result_stays_between_bracketing_ordinates(self) -> None:
        xs = self.wavy.xs
        ys = self.wavy.ys
        for k in range(len(xs) - 1):
            lo, hi = sorted((ys[k], ys[k + 1]))
            for x in np.linspace(xs[k], xs[k + 1], 17):
                y = self.wavy.evaluate(float(x))
                self.assertGreaterEqual(y, lo)
                self.assertLessEqual(y, hi)

    def test_repeated_calls_are_identical(self) -> None:
        first = self.wavy.evaluate(3.14159)
        for _ in range(10):
            self.assertEqual(self.wavy.evaluate(3.14159), first)

    def test_single_sample_is_constant(self) -> None:
        table = Table1D([(5.0, 42.0)])
        for x in (-100.0, 5.0, 1000.0):
            self.assertEqual(table.evaluate(x), 42.0)

    def test_call_is_evaluate(self) -> None:
        self.assertEqual(self.line(2.5), self.line.evaluate(2.5))

    def test_nan_query_gives_nan(self) -> None:
        self.assertTrue(math.isnan(self.line.evaluate(math.nan)))

    def test_concurrent_readers_agree(self) -> None:
        queries = np.linspace(-2.0, 25.0, 200)
        expected = [self.wavy.evaluate(float(q)) for q in queries]
        results: list[list[float]] = []

        def worker() -> None:
            results.append([self.wavy.evaluate(float(q)) for q in queries])

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        for r in results:
            self.assertEqual(r, expected)


class TestTable1DConstruction(unittest.TestCase):
    def test_samples_are_sorted(self) -> None:
        table = Table1D([(3.0, 30.0), (1.0, 10.0), (2.0, 20.0)])
        self.assertEqual(table.samples, [(1.0, 10.0), (2.0, 20.0), (3.0, 30.0)])
        self.assertEqual(table.evaluate(1.5), 15.0)
        self.assertEqual(table.domain, (1.0, 3.0))
        self.assertEqual(len(table), 3)

    def test_empty_is_rejected(self) -> None:
        with self.assertRaises(EmptyTableError):
            Table1D([])

    def test_duplicate_abscissa_is_rejected(self) -> None:
        with self.assertRaises(DuplicateAbscissaError):
            Table1D([(1.0, 1.0), (2.0, 2.0), (1.0, 3.0)])

    def test_min_spacing_treats_close_abscissae_as_duplicates(self) -> None:
        samples = [(1.0, 1.0), (1.0 + 1.0e-10, 2.0)]
        Table1D(samples)
        with self.assertRaises(DuplicateAbscissaError):
            Table1D(samples, config=TableConfig(min_spacing=1.0e-8))

    def test_non_finite_values_are_rejected(self) -> None:
        with self.assertRaises(NonFiniteValueError):
            Table1D([(math.nan, 1.0), (2.0, 2.0)])
        with self.assertRaises(NonFiniteValueError):
            Table1D([(1.0, 1.0), (2.0, math.inf)])

    def test_non_finite_ordinates_can_be_allowed(self) -> None:
        table = Table1D([(1.0, 1.0), (2.0, math.inf)], config=TableConfig(reject_non_finite=False))
        self.assertEqual(table.evaluate(5.0), math.inf)
        with self.assertRaises(NonFiniteValueError):
            Table1D([(math.inf, 1.0), (2.0, 2.0)], config=TableConfig(reject_non_finite=False))

    def test_malformed_samples_are_rejected(self) -> None:
        with self.assertRaises(TableConstructionError):
            Table1D([(1.0, 2.0, 3.0), (4.0, 5.0, 6.0)])
        with self.assertRaises(TableConstructionError):
            Table1D([(1.0, 2.0), (4.0,)])

    def test_from_arrays_length_mismatch(self) -> None:
        with self.assertRaises(TableConstructionError):
            Table1D.from_arrays([1.0, 2.0], [1.0])

    def test_construction_errors_are_value_errors(self) -> None:
        with self.assertRaises(ValueError):
            Table1D([])

    def test_stored_arrays_are_read_only(self) -> None:
        table = Table1D([(0.0, 0.0), (1.0, 1.0)])
        with self.assertRaises(ValueError):
            table.ys[0] = 5.0

    def test_caller_data_is_copied(self) -> None:
        xs = np.array([0.0, 1.0])
        ys = np.array([0.0, 1.0])
        table = Table1D.from_arrays(xs, ys)
        ys[1] = 100.0
        self.assertEqual(table.evaluate(1.0), 1.0)


class TestTable1DEvaluateMany(unittest.TestCase):
    def test_matches_scalar_evaluation(self) -> None:
        table = Table1D.from_arrays([1.0, 2.0, 7.0, 9.0, 13.0, 20.0], [8.0, 4.0, 6.0, 10.0, 3.0, 2.0])
        queries = np.concatenate([np.linspace(-5.0, 25.0, 301), table.xs])
        out = table.evaluate_many(queries)
        expected = np.array([table.evaluate(float(q)) for q in queries])
        np.testing.assert_array_equal(out, expected)

    def test_keeps_input_shape(self) -> None:
        table = Table1D([(0.0, 0.0), (10.0, 100.0)])
        out = table.evaluate_many(np.array([[-1.0, 5.0], [10.0, 11.0]]))
        np.testing.assert_array_equal(out, np.array([[0.0, 50.0], [100.0, 100.0]]))

    def test_single_sample_table(self) -> None:
        table = Table1D([(5.0, 42.0)])
        np.testing.assert_array_equal(table.evaluate_many([-100.0, 5.0, 1000.0]), [42.0, 42.0, 42.0])

    def test_nan_queries(self) -> None:
        table = Table1D([(0.0, 0.0), (10.0, 100.0)])
        out = table.evaluate_many([np.nan, 5.0])
        self.assertTrue(np.isnan(out[0]))
        self.assertEqual(out[1], 50.0)


class TestTable1DExtremeMagnitudes(unittest.TestCase):
    def test_span_wider_than_float_range(self) -> None:
        table = Table1D([(-1.5e308, 0.0), (1.5e308, 10.0)])
        y = table.evaluate(1.0e308)
        self.assertTrue(math.isfinite(y))
        self.assertAlmostEqual(y, 10.0 * 2.5 / 3.0, places=12)
        self.assertEqual(table.evaluate_many([1.0e308])[0], y)

    def test_ordinate_step_wider_than_float_range(self) -> None:
        table = Table1D([(0.0, -1.0e308), (1.0, 1.0e308)])
        y = table.evaluate(0.75)
        self.assertTrue(math.isfinite(y))
        self.assertAlmostEqual(y / 1.0e307, 5.0, places=9)
        self.assertEqual(table.evaluate_many([0.75])[0], y)

    def test_results_stay_between_extreme_ordinates(self) -> None:
        table = Table1D([(-1.7e308, -1.7e308), (1.7e308, 1.7e308)])
        queries = np.linspace(-1.6e308, 1.6e308, 33)
        out = table.evaluate_many(queries)
        self.assertTrue(np.all(np.isfinite(out)))
        self.assertTrue(np.all(out >= -1.7e308))
        self.assertTrue(np.all(out <= 1.7e308))
        for q, y in zip(queries, out):
            self.assertEqual(table.evaluate(float(q)), y)


class TestTable1DInputCoercion(unittest.TestCase):
    def test_large_distinct_integers_are_not_merged(self) -> None:
        with self.assertRaises(TableConstructionError) as ctx:
            Table1D([(2**53, 0.0), (2**53 + 1, 1.0)])
        self.assertNotIsInstance(ctx.exception, DuplicateAbscissaError)
        with self.assertRaises(TableConstructionError):
            Table1D.from_arrays(np.array([2**53, 2**53 + 1], dtype=np.int64), [0.0, 1.0])

    def test_exactly_representable_integers_are_accepted(self) -> None:
        table = Table1D([(2**53, 0.0), (2**54, 1.0), (3, 2.0)])
        self.assertEqual(table.domain, (3.0, float(2**54)))

    def test_strings_are_rejected(self) -> None:
        with self.assertRaises(TableConstructionError):
            Table1D([("1", 2.0), ("3", 4.0)])
        with self.assertRaises(TableConstructionError):
            Table1D([(1.0, "2"), (3.0, 4.0)])

    def test_non_real_values_are_rejected(self) -> None:
        with self.assertRaises(TableConstructionError):
            Table1D([(1.0, None), (3.0, 4.0)])
        with self.assertRaises(TableConstructionError):
            Table1D([(1.0, 1.0j), (3.0, 4.0)])


if __name__ == "__main__":
    unittest.main()
