import logging
from typing import List, Mapping, Optional

import pandas as pd

from ml_playground.data_handling.column_types import identify_numeric_columns
from ml_playground.data_handling.data_loader import DataLoader
from ml_playground.pipeline.exceptions import ConfigurationError
from ml_playground.pipeline.model_config import ModelConfig
from ml_playground.predictions.base_model import EpochCallback
from ml_playground.predictions.training.regression_model_trainer import RegressionModelTrainer
from ml_playground.predictions.training.results.results import TrainingResult


class PlaygroundSession:
    """
    Holds the state of one user working through the playground: a loaded
    dataset, the current model configuration and the result of the last
    training run. Loading data or changing the configuration discards the
    trained model and its results.
    """

    def __init__(self, data_loader: Optional[DataLoader] = None,
                 trainer: Optional[RegressionModelTrainer] = None):
        self.data_loader = data_loader or DataLoader()
        self.trainer = trainer or RegressionModelTrainer()
        self.logger = logging.getLogger(self.__class__.__name__)

        self.data_df: Optional[pd.DataFrame] = None
        self.dataset_name = ""
        self.headers: List[str] = []
        self.numeric_columns: List[str] = []
        self.config = ModelConfig()
        self.result: Optional[TrainingResult] = None

    @property
    def has_data(self) -> bool:
        return self.data_df is not None

    @property
    def trained_model(self):
        return self.result.trained_model if self.result is not None else None

    def _reset(self):
        self.data_df = None
        self.dataset_name = ""
        self.headers = []
        self.numeric_columns = []
        self.config = ModelConfig()
        self.result = None

    def load_dataset(self, source, file_name: Optional[str] = None) -> pd.DataFrame:
        self._reset()
        data_df = self.data_loader.load_csv(source, file_name=file_name)
        self._set_data(data_df, file_name or str(source))
        return data_df

    def load_sample(self, name: str) -> pd.DataFrame:
        self._reset()
        data_df = self.data_loader.load_sample(name)
        self._set_data(data_df, name)
        return data_df

    def _set_data(self, data_df: pd.DataFrame, dataset_name: str):
        self.data_df = data_df
        self.dataset_name = dataset_name
        self.headers = list(data_df.columns)
        self.numeric_columns = identify_numeric_columns(data_df)
        self.logger.info(f"Data loaded from {dataset_name}: {len(self.headers)} columns, "
                         f"numeric: {', '.join(self.numeric_columns) or 'none'}")

    def configure(self, target_column: Optional[str] = None, feature_columns=None,
                  model_type: Optional[str] = None) -> ModelConfig:
        config = self.config
        if target_column is not None:
            config = config.with_target(target_column)
        if feature_columns is not None:
            config = config.with_features(c for c in feature_columns if c != config.target_column)
        if model_type is not None:
            config = config.with_model_type(model_type)

        self.config = config
        self.result = None
        return config

    def available_features(self) -> List[str]:
        return self.config.available_features(self.headers)

    def train(self, on_epoch_end: Optional[EpochCallback] = None) -> TrainingResult:
        if not self.has_data:
            raise ConfigurationError("Please select data, a target column, and at least one feature column.")
        if not self.numeric_columns:
            raise ConfigurationError("The loaded dataset has no numeric columns to train on.")

        self.result = None
        self.result = self.trainer.train_and_evaluate(self.data_df, self.config, on_epoch_end=on_epoch_end)
        return self.result

    def predict(self, input_values: Mapping[str, object]) -> float:
        if self.trained_model is None:
            raise ConfigurationError("No trained model available. Please train the model first.")
        return self.trained_model.predict_one(input_values)
