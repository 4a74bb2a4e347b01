import logging

import numpy as np
import seaborn as sns
from matplotlib import pyplot as plt

from ml_playground.analysis.formatting import format_target_name
from ml_playground.visualisations.plotting import Plotter


class ModelPlotter(Plotter):
    def __init__(self, images_dir='images'):
        super().__init__(images_dir)
        self.logging = logging.getLogger(self.__class__.__name__)

    def plot_predictions_vs_actual(self, y_true, y_pred, target_column=None):
        target_name = format_target_name(target_column)
        y_true = np.asarray(y_true, dtype=float)
        y_pred = np.asarray(y_pred, dtype=float)

        self._init_plot(title=f"Predicted vs. Actual {target_name}", xlabel=f"Actual {target_name}",
                        ylabel=f"Predicted {target_name}", figsize=(8, 8))

        plt.scatter(y_true, y_pred, alpha=0.7, label="Predictions")
        plt.plot([y_true.min(), y_true.max()],
                 [y_true.min(), y_true.max()],
                 color='red', linestyle='--', label='Perfect Prediction')

        plt.legend()
        return self.save_plot("predictions_vs_actual.png")

    def plot_residuals(self, y_true, y_pred, target_column=None):
        target_name = format_target_name(target_column)
        y_pred = np.asarray(y_pred, dtype=float)
        residuals = np.asarray(y_true, dtype=float) - y_pred

        plt.figure(figsize=(12, 6))

        plt.subplot(1, 2, 1)
        sns.histplot(residuals, kde=bool(np.std(residuals) > 0))
        plt.title("Distribution of Residuals")
        plt.xlabel("Errors (y_true - y_pred)")

        plt.subplot(1, 2, 2)
        plt.scatter(y_pred, residuals, alpha=0.5)
        plt.axhline(0, color='red', linestyle='--')
        plt.title("Predictions vs. Errors")
        plt.xlabel(f"Predicted {target_name}")
        plt.ylabel("Errors (y_true - y_pred)")
        plt.tight_layout()

        return self.save_plot("residuals.png")

    def plot_loss_curve(self, loss_history):
        self._init_plot(title="Training Loss", xlabel="Epoch", ylabel="Loss (normalized MSE)")

        epochs = np.arange(1, len(loss_history) + 1)
        plt.plot(epochs, loss_history, marker='o' if len(loss_history) < 20 else None)

        return self.save_plot("training_loss.png")
