"""Core business logic layer.

Subpackages / modules:
- shopping: building the grocery list from the weekly menu
- ordering: locale-aware sort keys shared by the catalog and grocery list
- planner: the controller owning catalog + weekly menu state
"""
__all__ = ["shopping", "ordering", "planner"]
