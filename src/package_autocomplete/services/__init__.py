"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler / LSP -> Service -> Repository
    (Surface)     -> (Business) -> (Data Access)
"""

from .completion_service import CompletionResult, CompletionService
from .hover_service import HoverService
from .package_service import PackageService
from .sequencer import RequestSequencer

__all__ = [
    "CompletionResult",
    "CompletionService",
    "HoverService",
    "PackageService",
    "RequestSequencer",
]
