# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.
"""SAPF Language Server implementation using a static word dictionary."""
from __future__ import annotations

import json
import os
from typing import Any, Optional

# **********************************************************
# Imports needed for the language server.
# **********************************************************
import lsprotocol.types as lsp
from pygls import server

import sapf_knowledge
import sapf_queries
from sapf_documents import DocumentStore

GLOBAL_SETTINGS = {}

MAX_WORKERS = 5
LSP_SERVER = server.LanguageServer(
    name="SAPF Language Server",
    version="0.1.0",
    max_workers=MAX_WORKERS,
    text_document_sync_kind=lsp.TextDocumentSyncKind.Full,
)

TOOL_DISPLAY = "SAPF"

# **********************************************************
# Shared state
# **********************************************************

# Loaded once; a malformed dictionary stops the server from starting.
KNOWLEDGE_BASE = sapf_knowledge.load_default_knowledge_base()
DOCUMENTS = DocumentStore()

# Semantic token types (must match TokenKind values)
SEMANTIC_TOKEN_TYPES = [
    lsp.SemanticTokenTypes.Function.value,   # 0
    lsp.SemanticTokenTypes.Operator.value,   # 1
    lsp.SemanticTokenTypes.Number.value,     # 2
]

SEMANTIC_TOKEN_MODIFIERS = []


# **********************************************************
# Document synchronization
# **********************************************************

@LSP_SERVER.feature(lsp.TEXT_DOCUMENT_DID_OPEN)
def did_open(params: lsp.DidOpenTextDocumentParams) -> None:
    """LSP handler for textDocument/didOpen notification."""
    DOCUMENTS.open(params.text_document.uri, params.text_document.text)


@LSP_SERVER.feature(lsp.TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: lsp.DidChangeTextDocumentParams) -> None:
    """LSP handler for textDocument/didChange notification."""
    if DOCUMENTS.get(params.text_document.uri) is None:
        log_error(f"Change received for unopened document {params.text_document.uri}")
    DOCUMENTS.apply_change(params.text_document.uri, params.content_changes)


@LSP_SERVER.feature(lsp.TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: lsp.DidCloseTextDocumentParams) -> None:
    """LSP handler for textDocument/didClose notification."""
    DOCUMENTS.close(params.text_document.uri)


# **********************************************************
# Hover support
# **********************************************************

@LSP_SERVER.thread()
@LSP_SERVER.feature(lsp.TEXT_DOCUMENT_HOVER)
def hover(params: lsp.HoverParams) -> Optional[lsp.Hover]:
    """LSP handler for textDocument/hover request."""
    documentation = sapf_queries.hover(
        KNOWLEDGE_BASE,
        DOCUMENTS,
        params.text_document.uri,
        params.position.line,
        params.position.character,
    )
    if documentation is None:
        return None

    return lsp.Hover(
        contents=lsp.MarkupContent(
            kind=lsp.MarkupKind.Markdown,
            value=documentation,
        )
    )


# **********************************************************
# Completion
# **********************************************************

@LSP_SERVER.thread()
@LSP_SERVER.feature(
    lsp.TEXT_DOCUMENT_COMPLETION,
    lsp.CompletionOptions(trigger_characters=["."], resolve_provider=False),
)
def completion(params: lsp.CompletionParams) -> lsp.CompletionList:
    """LSP handler for textDocument/completion request."""
    items = sapf_queries.completion(
        KNOWLEDGE_BASE,
        DOCUMENTS,
        params.text_document.uri,
        params.position.line,
        params.position.character,
    )
    return lsp.CompletionList(is_incomplete=False, items=items)


# **********************************************************
# Semantic Tokens
# **********************************************************

@LSP_SERVER.thread()
@LSP_SERVER.feature(
    lsp.TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL,
    lsp.SemanticTokensLegend(
        token_types=SEMANTIC_TOKEN_TYPES,
        token_modifiers=SEMANTIC_TOKEN_MODIFIERS,
    ),
)
def semantic_tokens_full(params: lsp.SemanticTokensParams) -> lsp.SemanticTokens:
    """LSP handler for textDocument/semanticTokens/full request."""
    data = sapf_queries.semantic_tokens(KNOWLEDGE_BASE, DOCUMENTS, params.text_document.uri)
    return lsp.SemanticTokens(data=data)


# **********************************************************
# Required Language Server Initialization and Exit handlers.
# **********************************************************

@LSP_SERVER.feature(lsp.INITIALIZE)
def initialize(params: lsp.InitializeParams) -> None:
    """LSP handler for initialize request."""
    log_to_output(f"CWD Server: {os.getcwd()}")

    options = params.initialization_options or {}
    global_settings = options.get("globalSettings", {})
    if isinstance(global_settings, dict):
        GLOBAL_SETTINGS.update(**global_settings)
    else:
        log_error(f"Ignoring globalSettings, expected an object: {global_settings!r}")
    log_to_output(
        f"Global settings:\r\n{json.dumps(GLOBAL_SETTINGS, indent=4, ensure_ascii=False)}\r\n"
    )

    dictionary_path = os.getenv(sapf_knowledge.DICTIONARY_ENV_VAR)
    source = dictionary_path if dictionary_path else "embedded dictionary"
    log_to_output(
        f"Loaded {len(KNOWLEDGE_BASE)} {TOOL_DISPLAY} categories "
        f"({len(KNOWLEDGE_BASE.all_keywords())} words) from {source}"
    )
    for keyword, categories in KNOWLEDGE_BASE.duplicate_keywords().items():
        log_warning(
            f"Word '{keyword}' is declared in categories {', '.join(categories)}; "
            f"using the documentation from '{categories[0]}'"
        )


@LSP_SERVER.feature(lsp.INITIALIZED)
def initialized(_params: lsp.InitializedParams) -> None:
    """LSP handler for initialized notification."""
    log_always("Server initialized!")


@LSP_SERVER.feature(lsp.SHUTDOWN)
def on_shutdown(_params: Optional[Any] = None) -> None:
    """Handle clean up on shutdown."""
    log_to_output(f"Shutting down with {len(DOCUMENTS.uris())} open documents")


# *****************************************************
# Logging and notification.
# *****************************************************
def _show_notification_setting() -> str:
    return GLOBAL_SETTINGS.get(
        "showNotifications", os.getenv("LS_SHOW_NOTIFICATION", "off")
    )


def log_to_output(
    message: str, msg_type: lsp.MessageType = lsp.MessageType.Log
) -> None:
    LSP_SERVER.show_message_log(message, msg_type)


def log_error(message: str) -> None:
    LSP_SERVER.show_message_log(message, lsp.MessageType.Error)
    if _show_notification_setting() in ["onError", "onWarning", "always"]:
        LSP_SERVER.show_message(message, lsp.MessageType.Error)


def log_warning(message: str) -> None:
    LSP_SERVER.show_message_log(message, lsp.MessageType.Warning)
    if _show_notification_setting() in ["onWarning", "always"]:
        LSP_SERVER.show_message(message, lsp.MessageType.Warning)


def log_always(message: str) -> None:
    LSP_SERVER.show_message_log(message, lsp.MessageType.Info)
    if _show_notification_setting() in ["always"]:
        LSP_SERVER.show_message(message, lsp.MessageType.Info)


# *****************************************************
# Start the server.
# *****************************************************
def main() -> None:
    LSP_SERVER.start_io()


if __name__ == "__main__":
    main()
