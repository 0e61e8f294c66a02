"""SignalWire agents skill bundle.

This package ships the documentation bundle that teaches a coding assistant
to write code against the SignalWire AI Agents SDK, together with the small
amount of machinery needed to serve it: a read-only content store, an
activation matcher and a router. Nothing is loaded from disk on import.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
