"""
Package autocomplete language server.

Registers completion and hover for file-based app directives and wires
them to the shared services. Logging goes to stderr; stdout is the LSP
stream.
"""

from lsprotocol import types as lsp
from pygls.lsp.server import LanguageServer

from package_autocomplete import __version__
from package_autocomplete.logger import get_logger, set_log_level, setup_logging
from package_autocomplete.lsp.convert import TRIGGER_CHARACTERS, to_completion_list, to_hover
from package_autocomplete.repositories import MemoryQueryCache, NuGetClient
from package_autocomplete.services import CompletionService, HoverService, PackageService

logger = get_logger(__name__)

server = LanguageServer("package-autocomplete", __version__)

_client = NuGetClient.create()
_packages = PackageService.create(source=_client, cache=MemoryQueryCache.create())
_completions = CompletionService(package_service=_packages)
_hovers = HoverService(package_service=_packages)


def _line_text(uri: str, line: int) -> str | None:
    """Return the text of ``line`` without its line ending, or None."""
    document = server.workspace.get_text_document(uri)
    lines = document.lines
    if line >= len(lines):
        return None
    return lines[line].rstrip("\r\n")


def _log_level_from_options(options) -> str | None:
    if options is None:
        return None
    if isinstance(options, dict):
        return options.get("logLevel")
    return getattr(options, "logLevel", None)


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

@server.feature(lsp.INITIALIZE)
def on_initialize(params: lsp.InitializeParams):
    set_log_level(_log_level_from_options(params.initialization_options))
    logger.info("package-autocomplete %s initialized", __version__)


@server.feature(lsp.SHUTDOWN)
async def on_shutdown(params):
    await _client.close()


@server.feature(lsp.TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: lsp.DidCloseTextDocumentParams):
    _completions.forget(params.text_document.uri)


# ---------------------------------------------------------------------------
# Completion
# ---------------------------------------------------------------------------

@server.feature(
    lsp.TEXT_DOCUMENT_COMPLETION,
    lsp.CompletionOptions(trigger_characters=TRIGGER_CHARACTERS),
)
async def completion(params: lsp.CompletionParams) -> lsp.CompletionList | None:
    uri = params.text_document.uri
    position = params.position
    text = _line_text(uri, position.line)
    if text is None:
        return None
    cursor = min(position.character, len(text))
    result = await _completions.complete(text[:cursor], session=uri)
    return to_completion_list(result, position.line, cursor)


# ---------------------------------------------------------------------------
# Hover
# ---------------------------------------------------------------------------

@server.feature(lsp.TEXT_DOCUMENT_HOVER)
async def hover(params: lsp.HoverParams) -> lsp.Hover | None:
    position = params.position
    text = _line_text(params.text_document.uri, position.line)
    if text is None:
        return None
    info = await _hovers.hover(text, position.character)
    return to_hover(info, position.line)


def main() -> None:
    """Run the language server over stdio."""
    setup_logging()
    server.start_io()


if __name__ == "__main__":
    main()
