# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.
"""Hover, completion and semantic token answers for SAPF documents.

These functions only read the knowledge base and the document store, and
answer with an empty result whenever the document, line or column is not
there.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

import lsprotocol.types as lsp

import sapf_scanner
from sapf_documents import DocumentStore
from sapf_knowledge import Category, KnowledgeBase

TRIGGER_SUGGEST_COMMAND = lsp.Command(
    title="Trigger Suggestion",
    command="editor.action.triggerSuggest",
)


def _describe(kb: KnowledgeBase, word: str) -> Optional[str]:
    category = kb.lookup(word)
    if category is not None:
        return category.description
    return kb.all_keywords().get(word)


def hover(
    kb: KnowledgeBase, store: DocumentStore, uri: str, line: int, column: int
) -> Optional[str]:
    """Documentation for the word under the cursor.

    Category names are checked before keywords. A dotted word such as
    `math.add` that matches neither is retried with the part under the cursor.
    """
    text = store.get(uri)
    if text is None:
        return None

    span = sapf_scanner.word_span_at_position(text, line, column)
    if span is None:
        return None
    start, word = span

    documentation = _describe(kb, word)
    if documentation is None and "." in word:
        segment = sapf_scanner.segment_at_column(word, column - start)
        if segment:
            documentation = _describe(kb, segment)
    return documentation


def _category_item(category: Category) -> lsp.CompletionItem:
    return lsp.CompletionItem(
        label=category.name,
        kind=lsp.CompletionItemKind.Module,
        documentation=category.description,
        insert_text=f"{category.name}.",
        command=TRIGGER_SUGGEST_COMMAND,
    )


def _keyword_items(keywords: Iterable[Tuple[str, str]], prefix: str) -> List[lsp.CompletionItem]:
    return [
        lsp.CompletionItem(
            label=keyword,
            kind=lsp.CompletionItemKind.Keyword,
            documentation=documentation,
            insert_text=keyword,
        )
        for keyword, documentation in keywords
        if keyword.startswith(prefix)
    ]


def completion(
    kb: KnowledgeBase, store: DocumentStore, uri: str, line: int, column: int
) -> List[lsp.CompletionItem]:
    """Completion items for the text before the cursor.

    Matching categories always come first. After a `.`, the keywords of the
    named category follow; without a `.`, every keyword matching the prefix.
    """
    text = store.get(uri)
    if text is None:
        return []

    line_text = sapf_scanner.get_line(text, line)
    if line_text is None or column < 0 or column > len(line_text):
        return []
    prefix = line_text[:column]

    items = [_category_item(c) for c in kb.categories_with_prefix(prefix)]

    if "." in prefix:
        category_prefix, item_prefix = prefix.split(".", 1)
        category = kb.lookup(category_prefix)
        if category is not None:
            items.extend(_keyword_items(category.items.items(), item_prefix.strip()))
    else:
        items.extend(_keyword_items(kb.all_keywords().items(), prefix))

    return items


def encode_tokens(spans: Iterable[sapf_scanner.TokenSpan]) -> List[int]:
    """Delta-encode spans as `[deltaLine, deltaStart, length, kind, 0]` runs.

    `deltaLine` is taken against the line of the previous emitted token, and
    `deltaStart` is relative only when both tokens share a line.
    """
    result: List[int] = []
    prev_line = 0
    prev_start = 0
    for span in spans:
        if span.line == prev_line:
            delta_line = 0
            delta_start = span.start - prev_start
        else:
            delta_line = span.line - prev_line
            delta_start = span.start
        result.extend([delta_line, delta_start, span.length, int(span.kind), 0])
        prev_line = span.line
        prev_start = span.start
    return result


def semantic_tokens(kb: KnowledgeBase, store: DocumentStore, uri: str) -> List[int]:
    """Encoded semantic tokens for the whole document."""
    text = store.get(uri)
    if text is None:
        return []
    keywords = kb.all_keywords()
    return encode_tokens(sapf_scanner.scan_document(text, keywords))
