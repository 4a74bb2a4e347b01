import math
from unittest import TestCase

import numpy as np

from ml_playground.metrics.calculator import compute_raw_metrics
from ml_playground.metrics.metric_implementation import MAEMetric, MSEMetric, RMSEMetric, RSquaredMetric


class TestComputeRawMetrics(TestCase):

    def test_identical_sequences_are_a_perfect_fit(self):
        metrics = compute_raw_metrics([1.0, 2.0, 3.0], [1.0, 2.0, 3.0])

        self.assertEqual(metrics.mae, 0)
        self.assertEqual(metrics.mse, 0)
        self.assertEqual(metrics.rmse, 0)
        self.assertEqual(metrics.r_squared, 1)

    def test_constant_actuals_predicted_exactly_give_r_squared_one(self):
        metrics = compute_raw_metrics([5, 5, 5, 5], [5, 5, 5, 5])
        self.assertEqual(metrics.r_squared, 1)

    def test_constant_actuals_predicted_wrongly_give_r_squared_zero(self):
        metrics = compute_raw_metrics([5, 5, 5, 5], [1, 2, 3, 4])

        self.assertEqual(metrics.r_squared, 0)
        self.assertAlmostEqual(metrics.mae, 2.5)
        self.assertAlmostEqual(metrics.mse, 7.5)
        self.assertAlmostEqual(metrics.rmse, math.sqrt(7.5))

    def test_close_predictions(self):
        metrics = compute_raw_metrics([1, 2, 3, 4, 5], [1.1, 1.9, 3.2, 3.8, 5.1])

        self.assertAlmostEqual(metrics.mae, 0.14, places=9)
        self.assertAlmostEqual(metrics.mse, 0.022, places=9)
        self.assertAlmostEqual(metrics.rmse, math.sqrt(0.022), places=9)
        self.assertAlmostEqual(metrics.r_squared, 0.989, places=9)
        self.assertGreater(metrics.r_squared, 0.95)
        for value in (metrics.mae, metrics.mse, metrics.rmse, metrics.r_squared):
            self.assertTrue(math.isfinite(value))
        for value in (metrics.mae, metrics.mse, metrics.rmse):
            self.assertGreaterEqual(value, 0)

    def test_r_squared_can_be_negative(self):
        metrics = compute_raw_metrics([1, 2, 3], [3, 2, 1])
        self.assertAlmostEqual(metrics.r_squared, -3.0)

    def test_single_row(self):
        metrics = compute_raw_metrics([4.0], [3.0])

        self.assertEqual(metrics.mae, 1)
        self.assertEqual(metrics.r_squared, 0)

    def test_accepts_numpy_columns(self):
        metrics = compute_raw_metrics(np.array([[1.0], [2.0]]), np.array([1.5, 2.5]))
        self.assertAlmostEqual(metrics.mae, 0.5)

    def test_empty_input_is_rejected(self):
        with self.assertRaises(ValueError):
            compute_raw_metrics([], [])

    def test_length_mismatch_is_rejected(self):
        with self.assertRaises(ValueError):
            compute_raw_metrics([1, 2, 3], [1, 2])

    def test_non_finite_values_are_rejected(self):
        with self.assertRaises(ValueError):
            compute_raw_metrics([1, float("nan")], [1, 2])
        with self.assertRaises(ValueError):
            compute_raw_metrics([1, 2], [1, float("inf")])


def test_metric_names():
    assert [m().name() for m in (MAEMetric, MSEMetric, RMSEMetric, RSquaredMetric)] == \
           ["MAE", "MSE", "RMSE", "R-squared"]


def test_rmse_is_root_of_mse():
    y_true = np.array([3.0, -0.5, 2.0, 7.0])
    y_pred = np.array([2.5, 0.0, 2.0, 8.0])

    assert RMSEMetric().compute(y_true, y_pred) == np.sqrt(MSEMetric().compute(y_true, y_pred))
