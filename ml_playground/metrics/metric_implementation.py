import numpy as np
from sklearn.metrics import mean_absolute_error, mean_squared_error

from .metric_protocol import Metric


class MAEMetric(Metric):
    def name(self):
        return "MAE"

    def compute(self, y_true, y_pred):
        return float(mean_absolute_error(y_true=y_true, y_pred=y_pred))


class MSEMetric(Metric):
    def name(self):
        return "MSE"

    def compute(self, y_true, y_pred):
        return float(mean_squared_error(y_true=y_true, y_pred=y_pred))


class RMSEMetric(Metric):
    def name(self):
        return "RMSE"

    def compute(self, y_true, y_pred):
        return float(np.sqrt(MSEMetric().compute(y_true, y_pred)))


class RSquaredMetric(Metric):
    """
    Coefficient of determination. When every actual value is identical the
    total sum of squares is zero: a perfect prediction then scores 1, anything
    else scores 0.
    """
    def name(self):
        return "R-squared"

    def compute(self, y_true, y_pred):
        y_true = np.asarray(y_true, dtype=float)
        y_pred = np.asarray(y_pred, dtype=float)

        ss_tot = float(np.sum((y_true - y_true.mean()) ** 2))
        ss_res = float(np.sum((y_true - y_pred) ** 2))

        if ss_tot == 0:
            return 1.0 if ss_res == 0 else 0.0

        return 1.0 - ss_res / ss_tot
