"""Hover documentation for directive lines."""

from package_autocomplete import registries
from package_autocomplete.dto import HoverInfo
from package_autocomplete.entities import DirectiveKind
from package_autocomplete.services import formatter
from package_autocomplete.services.directive_resolver import token_at
from package_autocomplete.services.package_service import PackageService


class HoverService:
    """Documentation for the directive keyword or argument under the pointer.

    Packages are looked up on the feed; SDKs and properties come from the
    same registries that feed completion.
    """

    def __init__(self, package_service: PackageService) -> None:
        self._packages = package_service

    async def hover(self, line: str, character: int) -> HoverInfo | None:
        """Build hover documentation for ``line`` at ``character``.

        Args:
            line: Full text of the hovered line
            character: Zero-based column under the pointer

        Returns:
            HoverInfo spanning the hovered token, or None
        """
        token = token_at(line, character)
        if token is None:
            return None

        contents: str | None = None

        if token.kind is DirectiveKind.NEW_DIRECTIVE:
            description = registries.DIRECTIVES.get(token.value)
            if description:
                contents = formatter.directive_markdown(token.value, description)

        elif token.kind is DirectiveKind.PACKAGE_NAME:
            package = await self._packages.get_package(token.value)
            if package is not None:
                contents = formatter.package_hover_markdown(package, pinned_version=token.version)

        elif token.kind is DirectiveKind.SDK:
            sdk = registries.get_sdk(token.value)
            if sdk is not None:
                contents = formatter.sdk_markdown(sdk)

        elif token.kind is DirectiveKind.PROPERTY_NAME:
            prop = registries.get_property(token.value)
            if prop is not None:
                contents = formatter.property_markdown(prop)

        if contents is None:
            return None
        return HoverInfo(contents=contents, start=token.start, end=token.end)
