"""k8sbake - render Kubernetes manifests from helm, kompose or kustomize.

Runs as a pipeline step: reads action inputs, invokes one renderer and
publishes the path of the baked manifest.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .cli import main

__all__ = ["main"]
