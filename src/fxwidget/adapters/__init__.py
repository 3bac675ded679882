"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Persistence (preference storage)
- Host (widget registry, broadcasts, views)
- Channel (method calls from the main application)
- Formatting (output)
"""

__all__ = []
