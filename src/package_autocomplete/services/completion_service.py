"""Directive completion orchestration.

Classifies the text before the cursor and dispatches to the matching
suggestion source: the package service for package names and versions, or
the static registries for directives, SDKs and properties.
"""

from dataclasses import dataclass, field

from package_autocomplete import registries
from package_autocomplete.dto import SuggestionItem
from package_autocomplete.entities import DirectiveContext, DirectiveKind
from package_autocomplete.logger import get_logger
from package_autocomplete.services import formatter
from package_autocomplete.services.directive_resolver import resolve_context
from package_autocomplete.services.package_service import PackageService
from package_autocomplete.services.sequencer import RequestSequencer

logger = get_logger(__name__)


@dataclass
class CompletionResult:
    """Outcome of one completion request."""

    context: DirectiveContext | None
    items: list[SuggestionItem] = field(default_factory=list)
    stale: bool = False


class CompletionService:
    """Turn the text before the cursor into suggestions.

    Example:
        ```python
        completions = CompletionService(package_service=packages)
        result = await completions.complete("#:package Humani", session=uri)
        for item in result.items:
            print(item.insert_text)
        ```
    """

    def __init__(
        self,
        package_service: PackageService,
        sequencer: RequestSequencer | None = None,
    ) -> None:
        """Initialize the completion service.

        Args:
            package_service: Cached NuGet lookups (required).
            sequencer: Request sequencer. Defaults to a new one.
        """
        self._packages = package_service
        self._sequencer = sequencer or RequestSequencer()

    async def complete(self, text_before_cursor: str, session: str | None = None) -> CompletionResult:
        """Compute suggestions for the line text up to the cursor.

        Args:
            text_before_cursor: Current line truncated at the cursor
            session: Editor context key; a newer request for the same
                session makes this one stale. Requests without a session
                are never superseded.

        Returns:
            CompletionResult; stale results carry no items
        """
        seq = self._sequencer.issue(session) if session is not None else None
        context = resolve_context(text_before_cursor)
        if context is None:
            return CompletionResult(context=None)

        items = await self.suggest(context)

        if seq is not None and not self._sequencer.is_current(session, seq):
            logger.debug("Discarding superseded completion #%d for %s", seq, session)
            return CompletionResult(context=context, stale=True)

        return CompletionResult(context=context, items=items)

    async def suggest(self, context: DirectiveContext) -> list[SuggestionItem]:
        """Dispatch a classified context to its suggestion source."""
        start = context.replace_start

        if context.kind is DirectiveKind.NEW_DIRECTIVE:
            prefix = context.query.lower()
            return [
                formatter.directive_item(keyword, description, i)
                for i, (keyword, description) in enumerate(registries.DIRECTIVES.items())
                if keyword.startswith(prefix)
            ]

        if context.kind is DirectiveKind.PACKAGE_NAME:
            # An empty query never reaches the feed.
            if not context.query:
                return []
            packages = await self._packages.search_packages(context.query)
            return [formatter.package_item(pkg, start, i) for i, pkg in enumerate(packages)]

        if context.kind is DirectiveKind.PACKAGE_VERSION:
            if not context.package_id:
                return []
            versions = await self._packages.suggest_versions(context.package_id, context.query)
            return formatter.version_items(versions, start)

        if context.kind is DirectiveKind.SDK:
            return [
                formatter.sdk_item(sdk, start, i)
                for i, sdk in enumerate(registries.match_sdks(context.query))
            ]

        if context.kind is DirectiveKind.PROPERTY_NAME:
            return [
                formatter.property_item(prop, start, i)
                for i, prop in enumerate(registries.match_properties(context.query))
            ]

        if context.kind is DirectiveKind.PROPERTY_VALUE and context.property_name:
            info = registries.get_property(context.property_name)
            if info is None:
                return []
            values = registries.match_property_values(info.name, context.query)
            return formatter.property_value_items(info.name, values, start)

        return []

    def forget(self, session: str) -> None:
        """Drop sequencing state for a closed session."""
        self._sequencer.forget(session)

    @property
    def package_service(self) -> PackageService:
        """Get the underlying package service (for testing)."""
        return self._packages
