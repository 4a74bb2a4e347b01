from dataclasses import dataclass

import numpy as np

from ml_playground.metrics.numeric import EPSILON


@dataclass(frozen=True, eq=False)
class NormalizationParams:
    """
    Min-max scaling parameters learned from the training rows. Features are
    scaled per column, the target as a single column.
    """
    feature_min: np.ndarray
    feature_max: np.ndarray
    target_min: float
    target_max: float

    @classmethod
    def fit(cls, features, target) -> "NormalizationParams":
        features = np.asarray(features, dtype=float)
        target = np.asarray(target, dtype=float)

        feature_min = features.min(axis=0)
        feature_max = features.max(axis=0)
        feature_min.setflags(write=False)
        feature_max.setflags(write=False)

        return cls(
            feature_min=feature_min,
            feature_max=feature_max,
            target_min=float(target.min()),
            target_max=float(target.max()),
        )

    @property
    def n_features(self) -> int:
        return len(self.feature_min)

    def normalize_features(self, features) -> np.ndarray:
        features = np.asarray(features, dtype=float)
        if features.ndim != 2 or features.shape[1] != self.n_features:
            raise ValueError(f"Expected {self.n_features} feature columns, got shape {features.shape}.")

        return (features - self.feature_min) / (self.feature_max - self.feature_min + EPSILON)

    def normalize_target(self, target) -> np.ndarray:
        target = np.asarray(target, dtype=float)
        return (target - self.target_min) / (self.target_max - self.target_min + EPSILON)

    def denormalize_target(self, normalized) -> np.ndarray:
        normalized = np.asarray(normalized, dtype=float)
        return normalized * (self.target_max - self.target_min) + self.target_min
