"""agentboot: resolve agent characters and activate their capabilities and clients."""

__version__ = "0.1.0"
