import logging
from typing import Optional

import numpy as np
import pandas as pd

from ml_playground.analysis.performance_analyzer import analyze_performance
from ml_playground.data_handling.data_loader import clean_numeric_rows
from ml_playground.metrics.calculator import compute_raw_metrics
from ml_playground.pipeline.model_config import ModelConfig
from ml_playground.predictions.base_model import EpochCallback
from ml_playground.predictions.normalization import NormalizationParams
from ml_playground.predictions.registry import get_model_class
from ml_playground.predictions.trained_model import TrainedModel
from ml_playground.predictions.training.results.results import TargetStats, TrainingResult
from ml_playground.visualisations.model_plotting import ModelPlotter


class RegressionModelTrainer:
    def __init__(self, model_plotter: Optional[ModelPlotter] = None, **model_kwargs):
        self.model_plotter = model_plotter
        self.model_kwargs = model_kwargs
        self.logger = logging.getLogger(self.__class__.__name__)

    def train_and_evaluate(self, data_df: pd.DataFrame, config: ModelConfig,
                           on_epoch_end: Optional[EpochCallback] = None) -> TrainingResult:
        """
        Fits the configured model on min-max scaled rows and scores its
        denormalized predictions against the actual target values of the same rows.
        """
        config.validate(data_df.columns)

        features, target = clean_numeric_rows(data_df, config.target_column, list(config.feature_columns))
        dropped = len(data_df) - len(target)
        if dropped:
            self.logger.warning(f"Dropped {dropped} rows with non-numeric values in the selected columns.")

        self.logger.info(f"Training '{config.model_type}' model on {len(target)} rows: "
                         f"{config.target_column} ~ {', '.join(config.feature_columns)}")

        normalization = NormalizationParams.fit(features, target)
        x_train = normalization.normalize_features(features)
        y_train = normalization.normalize_target(target)

        model = get_model_class(config.model_type)(**self.model_kwargs)

        def report_epoch(epoch, total_epochs, loss):
            self.logger.info(f"Epoch {epoch + 1}/{total_epochs} - Loss: {loss:.4f}")
            if on_epoch_end is not None:
                on_epoch_end(epoch, total_epochs, loss)

        model.train(x_train, y_train, on_epoch_end=report_epoch)

        trained_model = TrainedModel(
            model=model,
            normalization=normalization,
            feature_columns=config.feature_columns,
            target_column=config.target_column,
            model_type=config.model_type,
        )

        predicted = trained_model.predict(features)
        metrics = compute_raw_metrics(target, predicted)
        target_stats = TargetStats.from_values(target)
        analysis = analyze_performance(metrics, target_stats, config.target_column)

        self.logger.info(f"Evaluation: MSE: {metrics.mse:.2f}, MAE: {metrics.mae:.2f}, RMSE: {metrics.rmse:.2f}, "
                         f"R²: {metrics.r_squared:.2f} -> grade {analysis.overall_grade} ({analysis.overall_score}/100)")

        if self.model_plotter is not None:
            self.model_plotter.plot_predictions_vs_actual(target, predicted, config.target_column)
            self.model_plotter.plot_residuals(target, predicted, config.target_column)
            self.model_plotter.plot_loss_curve(model.loss_history)

        return TrainingResult(
            trained_model=trained_model,
            metrics=metrics,
            target_stats=target_stats,
            analysis=analysis,
            actual=np.asarray(target),
            predicted=np.asarray(predicted),
            loss_history=tuple(model.loss_history),
        )
