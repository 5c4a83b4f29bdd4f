"""Result model package.

Defines the value objects callers build from traversal state, such as `Path`.
"""

from pathwalk.model.path import Path

__all__ = ["Path"]
