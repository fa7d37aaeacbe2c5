"""Tests for the conversion of service results into LSP types."""

from lsprotocol import types as lsp

from package_autocomplete.dto import HoverInfo
from package_autocomplete.lsp.convert import (
    TRIGGER_CHARACTERS,
    to_completion_item,
    to_completion_list,
    to_hover,
)
from package_autocomplete.services import CompletionResult


def test_trigger_characters():
    assert set(TRIGGER_CHARACTERS) == {"#", ":", " ", "@", "."}


async def test_package_items_replace_typed_query(completion_service):
    text = "#:package Humanizer"
    result = await completion_service.complete(text)

    completion_list = to_completion_list(result, line=3, cursor=len(text))

    assert completion_list.is_incomplete
    item = next(i for i in completion_list.items if i.label == "Humanizer")
    assert item.kind == lsp.CompletionItemKind.Module
    assert item.text_edit.new_text == "Humanizer@2.14.1"
    assert item.text_edit.range.start == lsp.Position(line=3, character=10)
    assert item.text_edit.range.end == lsp.Position(line=3, character=len(text))
    assert item.documentation.kind == lsp.MarkupKind.Markdown


async def test_directive_item_filters_on_inserted_text(completion_service):
    result = await completion_service.complete("#:pa")

    item = to_completion_item(result.items[0], line=0, cursor=4)

    assert item.kind == lsp.CompletionItemKind.Keyword
    assert item.filter_text == "#:package "
    assert item.text_edit.range.start.character == 0


async def test_version_list_is_complete(completion_service):
    result = await completion_service.complete("#:package Humanizer@")

    completion_list = to_completion_list(result, line=0, cursor=20)

    assert not completion_list.is_incomplete
    assert [i.label for i in completion_list.items] == ["2.14.1", "2.14.0", "2.0.0", "1.0.0"]


def test_stale_and_contextless_results_become_none():
    assert to_completion_list(CompletionResult(context=None), line=0, cursor=0) is None


def test_hover_conversion():
    hover = to_hover(HoverInfo(contents="**Humanizer**", start=10, end=19), line=2)

    assert hover.contents.value == "**Humanizer**"
    assert hover.range.start == lsp.Position(line=2, character=10)
    assert hover.range.end == lsp.Position(line=2, character=19)
    assert to_hover(None, line=0) is None
