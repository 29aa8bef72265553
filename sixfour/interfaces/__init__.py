"""
sixfour.interfaces - Developer interfaces for sixfour

This package contains the command-line tooling used to analyze positions and
benchmark the engine.
"""

# Don't import anything here to avoid circular imports
__all__ = []
