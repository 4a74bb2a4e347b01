import dataclasses
import unittest
from unittest.mock import MagicMock

import numpy as np
import pandas as pd

from ml_playground.pipeline.exceptions import ConfigurationError
from ml_playground.pipeline.model_config import ModelConfig
from ml_playground.predictions.trained_model import TrainedModel
from ml_playground.predictions.training.regression_model_trainer import RegressionModelTrainer


def make_linear_df():
    x1 = np.arange(1, 21, dtype=float)
    x2 = np.tile([1.0, 2.0, 4.0, 3.0], 5)
    y = 3 * x1 + 2 * x2 + 5
    df = pd.DataFrame({"x1": x1.astype(str), "x2": x2.astype(str), "y": y.astype(str), "label": "row"})
    df.loc[20] = ["n/a", "1", "10", "row"]
    return df


class TestRegressionModelTrainer(unittest.TestCase):
    def setUp(self):
        self.plotter = MagicMock()
        self.trainer = RegressionModelTrainer(model_plotter=self.plotter)
        self.config = ModelConfig(target_column="y", feature_columns=("x1", "x2"), model_type="simple")

    def test_train_and_evaluate_linear_data(self):
        epochs = []
        result = self.trainer.train_and_evaluate(make_linear_df(), self.config,
                                                 on_epoch_end=lambda *args: epochs.append(args))

        self.assertEqual(result.evaluated_rows, 20)
        self.assertGreater(result.metrics.r_squared, 0.9999)
        self.assertLess(result.metrics.mae, 1e-3)
        self.assertEqual(result.analysis.overall_grade, "A")
        self.assertEqual(result.analysis.overall_score, 100)
        self.assertEqual(len(result.analysis.metric_breakdown), 4)
        self.assertEqual(len(epochs), 1)
        self.assertEqual(len(result.loss_history), 1)
        np.testing.assert_allclose(result.predicted, result.actual, rtol=1e-4)

    def test_target_statistics_come_from_cleaned_rows(self):
        result = self.trainer.train_and_evaluate(make_linear_df(), self.config)

        y = 3 * np.arange(1, 21) + 2 * np.tile([1.0, 2.0, 4.0, 3.0], 5) + 5
        self.assertAlmostEqual(result.target_stats.target_mean, y.mean())
        self.assertEqual(result.target_stats.target_max, y.max())
        self.assertEqual(result.target_stats.target_min, y.min())
        self.assertAlmostEqual(result.target_stats.target_range, y.max() - y.min())

    def test_trained_model_predicts_single_rows(self):
        trained = self.trainer.train_and_evaluate(make_linear_df(), self.config).trained_model

        self.assertIsInstance(trained, TrainedModel)
        self.assertEqual(trained.feature_columns, ("x1", "x2"))
        self.assertAlmostEqual(trained.predict_one({"x1": "2", "x2": 1}), 13.0, places=3)

    def test_plots_are_produced(self):
        self.trainer.train_and_evaluate(make_linear_df(), self.config)

        self.plotter.plot_predictions_vs_actual.assert_called_once()
        self.plotter.plot_residuals.assert_called_once()
        self.plotter.plot_loss_curve.assert_called_once()

    def test_constant_target(self):
        df = pd.DataFrame({"x": ["1", "2", "3"], "y": ["5", "5", "5"]})
        config = ModelConfig(target_column="y", feature_columns=("x",))

        result = RegressionModelTrainer().train_and_evaluate(df, config)

        self.assertEqual(result.metrics.r_squared, 1)
        self.assertEqual(result.metrics.mae, 0)
        self.assertTrue(result.analysis.metric_breakdown[1].interpretation.endswith("The total range of Y is 0."))

    def test_results_can_be_compared(self):
        first = self.trainer.train_and_evaluate(make_linear_df(), self.config)
        second = self.trainer.train_and_evaluate(make_linear_df(), self.config)
        rescaled = dataclasses.replace(first.trained_model,
                                       normalization=dataclasses.replace(first.trained_model.normalization))

        self.assertEqual(first, first)
        self.assertNotEqual(first, second)
        self.assertEqual(first.analysis, second.analysis)
        self.assertNotEqual(first.trained_model, rescaled)

    def test_medium_model(self):
        config = self.config.with_model_type("medium")
        result = RegressionModelTrainer(epochs=3).train_and_evaluate(make_linear_df(), config)

        self.assertEqual(len(result.loss_history), 3)
        self.assertEqual(result.trained_model.model_type, "medium")
        self.assertTrue(np.all(np.isfinite(result.predicted)))

    def test_incomplete_configuration(self):
        with self.assertRaises(ConfigurationError):
            self.trainer.train_and_evaluate(make_linear_df(), ModelConfig(target_column="y"))

    def test_unknown_columns(self):
        config = ModelConfig(target_column="y", feature_columns=("x1", "missing"))

        with self.assertRaisesRegex(ConfigurationError, "missing"):
            self.trainer.train_and_evaluate(make_linear_df(), config)
