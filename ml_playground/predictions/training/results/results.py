from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from ml_playground.metrics.numeric import guard_zero


@dataclass(frozen=True)
class RawMetrics:
    """ Container for the regression metrics of one trained model. """
    mae: float
    mse: float
    rmse: float
    r_squared: float


@dataclass(frozen=True)
class TargetStats:
    """ Descriptive statistics of the evaluated target column. """
    target_mean: float
    target_range: float
    target_max: float
    target_min: float

    @classmethod
    def from_values(cls, actual: Sequence[float]) -> "TargetStats":
        """
        Computes the statistics of the actual target values. A mean or range of
        exactly zero is replaced by EPSILON so both can be used as divisors.
        """
        values = np.asarray(actual, dtype=float)
        if values.size == 0:
            raise ValueError("Cannot compute target statistics of an empty column.")

        target_max = float(values.max())
        target_min = float(values.min())

        return cls(
            target_mean=guard_zero(float(values.mean())),
            target_range=guard_zero(target_max - target_min),
            target_max=target_max,
            target_min=target_min,
        )


@dataclass(frozen=True)
class MetricBreakdownEntry:
    metric_name: str
    value: str
    interpretation: str
    score_contribution: Optional[str] = None


@dataclass(frozen=True)
class AnalysisResult:
    """ Graded, human readable summary of a model's performance. """
    overall_score: int
    overall_grade: str
    interpretive_blurb: str
    metric_breakdown: Tuple[MetricBreakdownEntry, ...]


@dataclass(frozen=True)
class TrainingResult:
    """ Container for the outcome of one training run. """
    trained_model: Any
    metrics: RawMetrics
    target_stats: TargetStats
    analysis: AnalysisResult
    actual: np.ndarray = field(repr=False, compare=False)
    predicted: np.ndarray = field(repr=False, compare=False)
    loss_history: Tuple[float, ...] = ()

    @property
    def evaluated_rows(self) -> int:
        return len(self.actual)
