"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .cache_entry import CacheEntryEntity
from .directive_context import DirectiveContext, DirectiveKind, DirectiveToken
from .package_record import PackageRecord

__all__ = [
    "CacheEntryEntity",
    "DirectiveContext",
    "DirectiveKind",
    "DirectiveToken",
    "PackageRecord",
]
