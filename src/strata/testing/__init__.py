"""Testing utilities for the resolver.

Provides in-memory implementations of the I/O seams for fast, isolated tests.
"""
from src.strata.testing.mocks import DictEnvironment, MockSourceLoader
from src.strata.utils.config.symbols import StaticModuleLoader

__all__ = [
    "MockSourceLoader",
    "DictEnvironment",
    "StaticModuleLoader",
]
