"""kubeui - terminal views for switching Kubernetes contexts and browsing pods."""

from kubeui.__version__ import __version__

__all__ = ["__version__"]
