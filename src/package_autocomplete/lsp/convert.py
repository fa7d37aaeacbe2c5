"""Conversions from service results to LSP types."""

from lsprotocol import types as lsp

from package_autocomplete.dto import HoverInfo, SuggestionItem, SuggestionKind
from package_autocomplete.entities import DirectiveKind
from package_autocomplete.services import CompletionResult

TRIGGER_CHARACTERS = ["#", ":", " ", "@", "."]

_KINDS = {
    SuggestionKind.KEYWORD: lsp.CompletionItemKind.Keyword,
    SuggestionKind.MODULE: lsp.CompletionItemKind.Module,
    SuggestionKind.VALUE: lsp.CompletionItemKind.Value,
    SuggestionKind.PROPERTY: lsp.CompletionItemKind.Property,
    SuggestionKind.ENUM_MEMBER: lsp.CompletionItemKind.EnumMember,
}


def _markdown(value: str) -> lsp.MarkupContent:
    return lsp.MarkupContent(kind=lsp.MarkupKind.Markdown, value=value)


def to_completion_item(item: SuggestionItem, line: int, cursor: int) -> lsp.CompletionItem:
    """Convert a suggestion into an LSP item replacing ``replace_start..cursor``."""
    edit_range = lsp.Range(
        start=lsp.Position(line=line, character=item.replace_start),
        end=lsp.Position(line=line, character=cursor),
    )
    return lsp.CompletionItem(
        label=item.label,
        kind=_KINDS[item.kind],
        detail=item.detail,
        documentation=_markdown(item.documentation) if item.documentation else None,
        sort_text=item.sort_text,
        # The client filters on the replaced text, which may include "#:".
        filter_text=item.insert_text,
        text_edit=lsp.TextEdit(range=edit_range, new_text=item.insert_text),
    )


def to_completion_list(result: CompletionResult, line: int, cursor: int) -> lsp.CompletionList | None:
    """Convert a completion result; superseded results become None."""
    if result.stale or result.context is None:
        return None
    # Package search results depend on the whole query, so ask the client
    # to re-request as the user keeps typing.
    incomplete = result.context.kind is DirectiveKind.PACKAGE_NAME
    return lsp.CompletionList(
        is_incomplete=incomplete,
        items=[to_completion_item(item, line, cursor) for item in result.items],
    )


def to_hover(info: HoverInfo | None, line: int) -> lsp.Hover | None:
    if info is None:
        return None
    return lsp.Hover(
        contents=_markdown(info.contents),
        range=lsp.Range(
            start=lsp.Position(line=line, character=info.start),
            end=lsp.Position(line=line, character=info.end),
        ),
    )
