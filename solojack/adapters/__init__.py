"""
Platform adapters for the solojack engine.

This package provides adapters that translate between the core game engine
and a presentation layer (console, tests, ...).
"""

from solojack.adapters.base import PlatformAdapter
from solojack.adapters.cli import CLIAdapter
from solojack.adapters.dummy import DummyAdapter

__all__ = ["PlatformAdapter", "CLIAdapter", "DummyAdapter"]
