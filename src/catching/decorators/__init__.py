"""Decorators: @catching."""

from catching.decorators.catching import catching

__all__ = ['catching']
