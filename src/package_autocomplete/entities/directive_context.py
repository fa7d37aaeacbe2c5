"""Directive classification results."""

from dataclasses import dataclass
from enum import Enum


class DirectiveKind(str, Enum):
    """What the text before the cursor is asking for."""

    NEW_DIRECTIVE = "new-directive"
    PACKAGE_NAME = "package-name"
    PACKAGE_VERSION = "package-version"
    SDK = "sdk"
    PROPERTY_NAME = "property-name"
    PROPERTY_VALUE = "property-value"


@dataclass(frozen=True)
class DirectiveContext:
    """Completion context for a directive line.

    Attributes:
        kind: Which suggestion source applies
        query: The partial text typed for the token under completion
        replace_start: Column where the token under completion starts
        package_id: Package id, for version completion
        property_name: Property name, for value completion
    """

    kind: DirectiveKind
    query: str
    replace_start: int
    package_id: str | None = None
    property_name: str | None = None


@dataclass(frozen=True)
class DirectiveToken:
    """A directive argument located under the cursor (used for hover).

    ``start``/``end`` are the column span of ``value`` on the line.
    """

    kind: DirectiveKind
    value: str
    start: int
    end: int
    version: str | None = None
