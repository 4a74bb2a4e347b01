import logging
import os

import matplotlib

matplotlib.use("Agg")

import seaborn as sns
from matplotlib import pyplot as plt


class Plotter:
    def __init__(self, images_dir='images'):
        self.logging = logging.getLogger(self.__class__.__name__)
        self.images_dir = images_dir

        self._create_directory(self.images_dir)

    @staticmethod
    def _create_directory(directory_path):
        """Helper function to create a directory if it does not exist."""
        if not os.path.exists(directory_path):
            os.makedirs(directory_path)

    @staticmethod
    def _init_plot(title=None, xlabel=None, ylabel=None, figsize=(12, 6)):
        plt.figure(figsize=figsize)
        sns.set_style("whitegrid")

        if title: plt.title(title)
        if xlabel: plt.xlabel(xlabel)
        if ylabel: plt.ylabel(ylabel)

        plt.grid(True)

    def save_plot(self, filename):
        """Helper function to save the current plot to the images directory."""
        path = os.path.join(self.images_dir, filename)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()
        self.logging.debug(f"Saved plot to {path}")
        return path
