import logging
from typing import Callable, List, Optional

EpochCallback = Callable[[int, int, float], None]


class BaseModel:
    def __init__(self, epochs: int = 1):
        self.model = None
        self.epochs = epochs
        self.loss_history: List[float] = []
        self.logger = logging.getLogger(self.__class__.__name__)

    def train(self, x_train, y_train, on_epoch_end: Optional[EpochCallback] = None):
        raise NotImplementedError("Train method must be implemented.")

    def predict(self, x):
        if self.model is None:
            raise ValueError("Model is not trained yet.")
        return self.model.predict(x)

    def _report_epoch(self, epoch: int, loss: float, on_epoch_end: Optional[EpochCallback]):
        self.loss_history.append(loss)
        self.logger.debug(f"Epoch {epoch + 1}/{self.epochs} - Loss: {loss:.4f}")
        if on_epoch_end is not None:
            on_epoch_end(epoch, self.epochs, loss)
