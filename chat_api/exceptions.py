class ConfigurationError(RuntimeError):
    """Raised when the chat client cannot be built from the current configuration."""
