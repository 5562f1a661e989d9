"""Version information for kubeui."""

__version__ = "0.3.0"
