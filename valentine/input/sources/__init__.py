"""
Input source implementations.

The pygame-backed KeyboardInputSource lives in
valentine.input.sources.keyboard and is imported by the launchers only.
"""

from valentine.input.sources.base import InputSource

__all__ = ['InputSource']
