from ml_playground.predictions.baselines.linear_regression import LinearRegressionModel
from ml_playground.predictions.regression.neural_network import NeuralNetworkModel

MODEL_REGISTRY = {
    "simple": LinearRegressionModel,
    "medium": NeuralNetworkModel,
}

def get_model_class(model_type: str):
    """
    Retrieves a model class from the registry
    """
    if model_type not in MODEL_REGISTRY:
        raise ValueError(f"Model type '{model_type}' not found in the registry.")

    return MODEL_REGISTRY[model_type]
