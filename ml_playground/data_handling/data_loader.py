import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from ml_playground.data_handling.column_types import to_numeric_column
from ml_playground.data_handling.exceptions import (DatasetParseError, DatasetTooLargeError, EmptyDatasetError,
                                                    InvalidFileTypeError, NoValidRowsError, TooManyColumnsError)

MAX_ROWS = 5000
MAX_COLS = 20

SAMPLES_DIR = Path(__file__).parent / "samples"

SAMPLE_DATASETS = {
    "Predict Car MPG": "car_mpg.csv",
    "Predict Medical Costs": "medical_costs.csv",
    "Predict House Prices": "house_prices.csv",
}


class DataLoader:
    def __init__(self, max_rows: int = MAX_ROWS, max_cols: int = MAX_COLS):
        self.max_rows = max_rows
        self.max_cols = max_cols
        self.logger = logging.getLogger(self.__class__.__name__)

    def load_csv(self, source, file_name: Optional[str] = None) -> pd.DataFrame:
        """
        Reads a CSV file (path or open buffer) with a header row. Every cell is
        kept as a string; numeric conversion happens once the columns are chosen.
        """
        if file_name is None and isinstance(source, (str, os.PathLike)):
            file_name = os.fspath(source)

        if file_name is not None and not str(file_name).lower().endswith(".csv"):
            raise InvalidFileTypeError("Invalid file type. Please upload a CSV file.")

        try:
            data_df = pd.read_csv(source, dtype=str, keep_default_na=False, skip_blank_lines=True)
        except pd.errors.EmptyDataError as e:
            raise EmptyDatasetError("CSV file is empty or could not be parsed correctly.", e)
        except pd.errors.ParserError as e:
            raise DatasetParseError(f"Error parsing CSV: {e}. Please check the CSV format.", e)
        except UnicodeDecodeError as e:
            raise DatasetParseError("Could not read the CSV file as UTF-8 text. "
                                    "Please save it with UTF-8 encoding.", e)

        self.validate(data_df)

        self.logger.info(f"Loaded {len(data_df)} rows and {len(data_df.columns)} columns "
                         f"from {file_name or 'buffer'}")
        return data_df

    def load_sample(self, name: str) -> pd.DataFrame:
        if name not in SAMPLE_DATASETS:
            raise ValueError(f"Unknown sample dataset '{name}'. Available: {', '.join(SAMPLE_DATASETS)}")

        return self.load_csv(SAMPLES_DIR / SAMPLE_DATASETS[name])

    def validate(self, data_df: pd.DataFrame):
        if data_df is None or data_df.empty:
            raise EmptyDatasetError("No data loaded or data is empty.")

        if len(data_df) > self.max_rows:
            raise DatasetTooLargeError(f"Dataset is too large ({len(data_df)} rows). "
                                       f"Please choose a smaller one (max {self.max_rows} rows).")

        if len(data_df.columns) > self.max_cols:
            raise TooManyColumnsError(f"Dataset has too many columns ({len(data_df.columns)} columns). "
                                      f"Please choose a simpler one (max {self.max_cols} columns).")


def clean_numeric_rows(data_df: pd.DataFrame, target_column: str,
                       feature_columns: List[str]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Converts the selected columns to floats and keeps only the rows where the
    target and every feature parsed. Returns ``(features, target)`` with shapes
    ``(n, len(feature_columns))`` and ``(n,)``.
    """
    target = to_numeric_column(data_df[target_column])
    features = np.column_stack([to_numeric_column(data_df[col]) for col in feature_columns])

    valid_rows = ~np.isnan(features).any(axis=1) & ~np.isnan(target)
    if not valid_rows.any():
        raise NoValidRowsError("No valid numeric data found for selected features and target after cleaning. "
                               "Please check your data and selections, or ensure columns contain only numbers.")

    return features[valid_rows], target[valid_rows]
