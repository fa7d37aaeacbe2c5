"""Classify the text before the cursor on a directive line.

Recognized forms (the directive always starts at column 0):

    #  /  #:<prefix>                  new-directive
    #:package <query>                 package-name
    #:package <id>@<versionPrefix>    package-version
    #:sdk <query>                     sdk
    #:property <name>                 property-name
    #:property <name>=<valuePrefix>   property-value (a space also separates)
"""

import re

from package_autocomplete.entities import DirectiveContext, DirectiveKind, DirectiveToken

# NuGet ids: letters, digits, '_', '.', '-'; never starting with '.' or '-'.
_ID = r"\w[\w.-]*"

_NEW_DIRECTIVE = re.compile(r"^#(?::([A-Za-z]*))?$")
_PACKAGE_VERSION = re.compile(rf"^#:package\s+({_ID})@([^\s@]*)$")
_PACKAGE_NAME = re.compile(r"^#:package\s+([^@\s]*)$")
_SDK = re.compile(r"^#:sdk\s+([^@\s]*)$")
_PROPERTY_VALUE = re.compile(r"^#:property\s+(\w+)(?:\s*=\s*|\s+)([^\s=]*)$")
_PROPERTY_NAME = re.compile(r"^#:property\s+(\w*)$")

_KEYWORD_TOKEN = re.compile(r"^#:(package|sdk|property)\b")
_PACKAGE_TOKEN = re.compile(rf"^#:package\s+({_ID})(?:@(\S*))?")
_SDK_TOKEN = re.compile(rf"^#:sdk\s+({_ID})")
_PROPERTY_TOKEN = re.compile(r"^#:property\s+(\w+)")


def resolve_context(text_before_cursor: str) -> DirectiveContext | None:
    """Classify the line text from column 0 up to the cursor.

    Args:
        text_before_cursor: The current line, truncated at the cursor

    Returns:
        The completion context, or None when the line is not a directive
        being completed
    """
    if not text_before_cursor.startswith("#"):
        return None

    m = _NEW_DIRECTIVE.match(text_before_cursor)
    if m:
        return DirectiveContext(DirectiveKind.NEW_DIRECTIVE, m.group(1) or "", replace_start=0)

    m = _PACKAGE_VERSION.match(text_before_cursor)
    if m:
        return DirectiveContext(
            DirectiveKind.PACKAGE_VERSION,
            m.group(2),
            replace_start=m.start(2),
            package_id=m.group(1),
        )

    m = _PACKAGE_NAME.match(text_before_cursor)
    if m:
        return DirectiveContext(DirectiveKind.PACKAGE_NAME, m.group(1), replace_start=m.start(1))

    m = _SDK.match(text_before_cursor)
    if m:
        return DirectiveContext(DirectiveKind.SDK, m.group(1), replace_start=m.start(1))

    m = _PROPERTY_VALUE.match(text_before_cursor)
    if m:
        return DirectiveContext(
            DirectiveKind.PROPERTY_VALUE,
            m.group(2),
            replace_start=m.start(2),
            property_name=m.group(1),
        )

    m = _PROPERTY_NAME.match(text_before_cursor)
    if m:
        return DirectiveContext(DirectiveKind.PROPERTY_NAME, m.group(1), replace_start=m.start(1))

    return None


def token_at(line: str, character: int) -> DirectiveToken | None:
    """Find the directive keyword or argument under the cursor.

    The cursor must fall inside the token's exact span; a package id is
    matched as a whole, never by a partial segment.

    Args:
        line: Full text of the line
        character: Zero-based cursor column

    Returns:
        The token, or None when the cursor is not on a known token
    """
    m = _KEYWORD_TOKEN.match(line)
    if m is None:
        return None
    if _within(m, 1, character):
        return DirectiveToken(DirectiveKind.NEW_DIRECTIVE, m.group(1), m.start(1), m.end(1))

    m = _PACKAGE_TOKEN.match(line)
    if m and _within(m, 1, character):
        return DirectiveToken(
            DirectiveKind.PACKAGE_NAME,
            m.group(1),
            m.start(1),
            m.end(1),
            version=m.group(2) or None,
        )

    m = _SDK_TOKEN.match(line)
    if m and _within(m, 1, character):
        return DirectiveToken(DirectiveKind.SDK, m.group(1), m.start(1), m.end(1))

    m = _PROPERTY_TOKEN.match(line)
    if m and _within(m, 1, character):
        return DirectiveToken(DirectiveKind.PROPERTY_NAME, m.group(1), m.start(1), m.end(1))

    return None


def _within(match: re.Match, group: int, character: int) -> bool:
    return match.start(group) <= character < match.end(group)
