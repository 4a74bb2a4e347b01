import math
import re
from typing import List, Sequence

import numpy as np
import pandas as pd

NUMERIC_SAMPLE_SIZE = 100

_LEADING_FLOAT = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_float(value) -> float:
    """
    Parses the leading number of a value the way a browser's ``parseFloat``
    does: ``"12.5kg"`` -> 12.5, ``" 3"`` -> 3.0, ``"abc"`` -> nan.
    Results that are not finite are reported as nan as well.
    """
    if value is None:
        return math.nan
    if isinstance(value, (int, float, np.number)) and not isinstance(value, bool):
        return float(value) if math.isfinite(value) else math.nan

    match = _LEADING_FLOAT.match(str(value))
    if not match:
        return math.nan

    parsed = float(match.group(0))
    return parsed if math.isfinite(parsed) else math.nan


def is_numeric_value(value) -> bool:
    if value is None or str(value).strip() == "":
        return False
    return not math.isnan(parse_float(value))


def identify_numeric_columns(data_df: pd.DataFrame, sample_size: int = NUMERIC_SAMPLE_SIZE) -> List[str]:
    """
    Returns the columns whose first ``sample_size`` rows all hold a parseable
    number. Column order follows the dataframe.
    """
    if data_df is None or data_df.empty:
        return []

    sample = data_df.head(min(sample_size, len(data_df)))
    return [col for col in data_df.columns if all(is_numeric_value(value) for value in sample[col])]


def to_numeric_column(values: Sequence) -> np.ndarray:
    return np.array([parse_float(value) for value in values], dtype=float)
