class ConfigurationError(Exception):
    """Raised when a training run is requested without a complete model configuration."""
