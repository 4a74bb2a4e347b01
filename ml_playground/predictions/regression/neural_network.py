from sklearn.neural_network import MLPRegressor

from ml_playground.predictions.base_model import BaseModel


class NeuralNetworkModel(BaseModel):
    """
    The "medium" model: a feed-forward network with two ReLU hidden layers
    (32 and 16 units) trained with Adam on the squared error, one epoch per
    ``partial_fit`` call so progress can be reported after each epoch.
    """
    EPOCHS = 100
    BATCH_SIZE = 32
    LEARNING_RATE = 0.01
    HIDDEN_LAYERS = (32, 16)

    def __init__(self, epochs: int = EPOCHS, random_state: int = 42, **kwargs):
        if epochs < 1:
            raise ValueError(f"epochs must be at least 1, got {epochs}")
        super().__init__(epochs=epochs)
        self.random_state = random_state

    def train(self, x_train, y_train, on_epoch_end=None):
        self.logger.info(f"NeuralNetwork: Training model for {self.epochs} epochs..")
        self.loss_history = []

        self.model = MLPRegressor(
            hidden_layer_sizes=self.HIDDEN_LAYERS,
            activation='relu',
            solver='adam',
            learning_rate_init=self.LEARNING_RATE,
            batch_size=min(self.BATCH_SIZE, len(x_train)),
            random_state=self.random_state,
        )

        for epoch in range(self.epochs):
            self.model.partial_fit(x_train, y_train)
            self._report_epoch(epoch, float(self.model.loss_), on_epoch_end)

        self.logger.info(f"Training completed. Final loss: {self.loss_history[-1]:.4f}")
