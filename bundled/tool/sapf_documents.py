# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.
"""In-memory store of the text of open documents."""
from __future__ import annotations

import threading
from typing import Dict, List, Optional, Sequence

import lsprotocol.types as lsp


class DocumentStore:
    """Maps a document URI to its full current text.

    Every change replaces the whole text. Reads and writes share one lock,
    so a reader never sees a half-applied update.
    """

    def __init__(self):
        self._documents: Dict[str, str] = {}
        self._lock = threading.Lock()

    def open(self, uri: str, text: str) -> None:
        with self._lock:
            self._documents[uri] = text

    def apply_change(
        self, uri: str, changes: Sequence[lsp.TextDocumentContentChangeEvent]
    ) -> None:
        """Store the text of the last change in the batch."""
        if not changes:
            return
        text = changes[-1].text
        with self._lock:
            self._documents[uri] = text

    def get(self, uri: str) -> Optional[str]:
        with self._lock:
            return self._documents.get(uri)

    def close(self, uri: str) -> None:
        with self._lock:
            self._documents.pop(uri, None)

    def uris(self) -> List[str]:
        with self._lock:
            return list(self._documents)
