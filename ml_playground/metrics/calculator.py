import logging
from typing import Sequence

import numpy as np

from ml_playground.metrics.metric_implementation import MAEMetric, MSEMetric, RMSEMetric, RSquaredMetric
from ml_playground.predictions.training.results.results import RawMetrics

logger = logging.getLogger(__name__)


def _as_checked_arrays(actual: Sequence[float], predicted: Sequence[float]):
    y_true = np.asarray(actual, dtype=float).ravel()
    y_pred = np.asarray(predicted, dtype=float).ravel()

    if y_true.size == 0:
        raise ValueError("Cannot compute metrics without any evaluated rows.")
    if y_true.shape != y_pred.shape:
        raise ValueError(f"Length mismatch: {y_true.size} actual values vs. {y_pred.size} predictions.")
    if not (np.all(np.isfinite(y_true)) and np.all(np.isfinite(y_pred))):
        raise ValueError("Actual and predicted values must be finite numbers.")

    return y_true, y_pred


def compute_raw_metrics(actual: Sequence[float], predicted: Sequence[float]) -> RawMetrics:
    """
    Turns the actual target values and the (denormalized) predictions into
    MAE, MSE, RMSE and R-squared.

    The caller is responsible for dropping rows that failed numeric parsing.
    Empty, mismatched or non-finite input is a programming error and raises
    a ValueError.
    """
    y_true, y_pred = _as_checked_arrays(actual, predicted)

    metrics = RawMetrics(
        mae=MAEMetric().compute(y_true, y_pred),
        mse=MSEMetric().compute(y_true, y_pred),
        rmse=RMSEMetric().compute(y_true, y_pred),
        r_squared=RSquaredMetric().compute(y_true, y_pred),
    )

    logger.debug(f"Metrics over {y_true.size} rows: MAE: {metrics.mae:.4f}, MSE: {metrics.mse:.4f}, "
                 f"RMSE: {metrics.rmse:.4f}, R²: {metrics.r_squared:.4f}")
    return metrics
