"""Command-line interface for lambert_et."""

from .interface import cli

__all__ = ['cli']
