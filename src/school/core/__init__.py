"""Core business logic module.

Modules:
- registry: StudentRegistry, the data access handler behind the menu
"""

from school.core.registry import StudentRegistry

__all__ = ["StudentRegistry"]
