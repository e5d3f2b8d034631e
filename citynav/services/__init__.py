"""Services layer - Application orchestration.

Available services:
- NavigationService: Network inspection, traffic updates and routing
"""

from .navigation import NavigationService

__all__ = ["NavigationService"]
