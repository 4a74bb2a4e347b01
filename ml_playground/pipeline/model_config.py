from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple

from ml_playground.pipeline.exceptions import ConfigurationError
from ml_playground.predictions.registry import MODEL_REGISTRY


@dataclass(frozen=True)
class ModelConfig:
    target_column: str = ""
    feature_columns: Tuple[str, ...] = ()
    model_type: str = "simple"

    def __post_init__(self):
        object.__setattr__(self, "feature_columns", tuple(self.feature_columns))

    def with_target(self, target_column: str) -> "ModelConfig":
        """ Selects a new target; it is removed from the features if it was one of them. """
        features = tuple(col for col in self.feature_columns if col != target_column)
        return replace(self, target_column=target_column, feature_columns=features)

    def with_features(self, feature_columns: Iterable[str]) -> "ModelConfig":
        if isinstance(feature_columns, str):
            feature_columns = [col for col in feature_columns.split(",") if col]
        return replace(self, feature_columns=tuple(feature_columns))

    def with_model_type(self, model_type: str) -> "ModelConfig":
        return replace(self, model_type=model_type)

    def available_features(self, headers: Iterable[str]) -> List[str]:
        return [header for header in headers if header != self.target_column]

    @property
    def is_complete(self) -> bool:
        return bool(self.target_column) and len(self.feature_columns) > 0

    def validate(self, headers: Iterable[str] = None):
        if not self.is_complete:
            raise ConfigurationError("Please select data, a target column, and at least one feature column.")

        if self.model_type not in MODEL_REGISTRY:
            raise ConfigurationError(f"Unknown model type '{self.model_type}'. "
                                     f"Choose one of: {', '.join(MODEL_REGISTRY)}")

        if self.target_column in self.feature_columns:
            raise ConfigurationError(f"Target column '{self.target_column}' cannot also be a feature.")

        if headers is not None:
            headers = list(headers)
            missing = [col for col in (self.target_column, *self.feature_columns) if col not in headers]
            if missing:
                raise ConfigurationError(f"Columns not found in dataset: {', '.join(missing)}")
