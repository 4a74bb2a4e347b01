import logging
from dataclasses import dataclass
from typing import Mapping, Tuple

import numpy as np

from ml_playground.data_handling.column_types import parse_float
from ml_playground.predictions.base_model import BaseModel
from ml_playground.predictions.exceptions import PredictionInputError
from ml_playground.predictions.normalization import NormalizationParams

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrainedModel:
    """ A fitted model together with the scaling it was trained under. """
    model: BaseModel
    normalization: NormalizationParams
    feature_columns: Tuple[str, ...]
    target_column: str
    model_type: str = "simple"

    def predict(self, features) -> np.ndarray:
        """ Predicts on raw (unscaled) feature rows and returns values in target units. """
        normalized = self.normalization.normalize_features(features)
        predictions = np.asarray(self.model.predict(normalized), dtype=float).ravel()
        return self.normalization.denormalize_target(predictions)

    def predict_one(self, input_values: Mapping[str, object]) -> float:
        """
        Predicts the target for a single row given as ``{feature column: raw value}``.
        Raw values may be strings as typed by a user.
        """
        feature_values = []
        for col in self.feature_columns:
            value = input_values.get(col)
            if value is None or str(value).strip() == "":
                raise PredictionInputError(f'Please provide a value for "{col}".', column=col)

            number = parse_float(value)
            if np.isnan(number):
                raise PredictionInputError(f'Invalid input for "{col}". Please enter a numeric value.', column=col)
            feature_values.append(number)

        prediction = float(self.predict([feature_values])[0])
        logger.info(f"Predicted {self.target_column} = {prediction:.2f} from {dict(zip(self.feature_columns, feature_values))}")
        return prediction
