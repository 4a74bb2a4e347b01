import dataclasses
from unittest import TestCase

import numpy as np

from ml_playground.predictions.normalization import NormalizationParams


class TestNormalizationParams(TestCase):
    def setUp(self):
        self.features = np.array([[0.0, 10.0], [5.0, 20.0], [10.0, 30.0]])
        self.target = np.array([100.0, 150.0, 300.0])
        self.params = NormalizationParams.fit(self.features, self.target)

    def test_fit_records_min_and_max(self):
        np.testing.assert_array_equal(self.params.feature_min, [0.0, 10.0])
        np.testing.assert_array_equal(self.params.feature_max, [10.0, 30.0])
        self.assertEqual(self.params.target_min, 100.0)
        self.assertEqual(self.params.target_max, 300.0)
        self.assertEqual(self.params.n_features, 2)

    def test_features_are_scaled_to_unit_range(self):
        normalized = self.params.normalize_features(self.features)
        np.testing.assert_allclose(normalized, [[0, 0], [0.5, 0.5], [1, 1]], atol=1e-6)

    def test_target_round_trip(self):
        normalized = self.params.normalize_target(self.target)
        np.testing.assert_allclose(self.params.denormalize_target(normalized), self.target, rtol=1e-6)

    def test_constant_column_does_not_divide_by_zero(self):
        params = NormalizationParams.fit([[3.0], [3.0]], [7.0, 7.0])

        np.testing.assert_array_equal(params.normalize_features([[3.0], [3.0]]), [[0.0], [0.0]])
        np.testing.assert_array_equal(params.normalize_target([7.0, 7.0]), [0.0, 0.0])
        np.testing.assert_array_equal(params.denormalize_target([0.0]), [7.0])

    def test_wrong_feature_count_is_rejected(self):
        with self.assertRaises(ValueError):
            self.params.normalize_features([[1.0, 2.0, 3.0]])

    def test_params_are_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.params.target_min = 0.0
        with self.assertRaises(ValueError):
            self.params.feature_min[0] = 99.0

    def test_params_compare_without_array_truth_value_errors(self):
        refit = NormalizationParams.fit(self.features, self.target)

        self.assertEqual(self.params, self.params)
        self.assertNotEqual(self.params, refit)
        self.assertEqual(len({self.params, refit}), 2)
