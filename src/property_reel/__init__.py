"""Property Reel - timeline planning for property walkthrough videos."""

from .tools.assembler import assemble

__version__ = "0.1.0"

__all__ = ["assemble", "__version__"]
