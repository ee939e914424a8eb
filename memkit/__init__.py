"""Composable simulated allocators, allocator-aware containers and test helpers."""

__version__ = "0.1.0"