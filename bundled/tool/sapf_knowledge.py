# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.
"""Dictionary-driven knowledge base for SAPF words.

The knowledge base is built once from a JSON payload and is never mutated
afterwards, so request handlers share it without locking.
"""
from __future__ import annotations

import dataclasses
import json
import os
import types
from typing import Any, Dict, List, Mapping, Optional

import sapf_dictionary

DICTIONARY_ENV_VAR = "SAPF_LS_DICTIONARY"


class KnowledgeBaseError(ValueError):
    """Raised when the dictionary payload cannot be turned into a knowledge base."""


@dataclasses.dataclass(frozen=True)
class Category:
    """A named group of keywords sharing a description."""

    name: str
    description: str
    items: Mapping[str, str]


class KnowledgeBase:
    """Read-only mapping of category name to `Category`."""

    def __init__(self, categories: Dict[str, Category]):
        self._categories = types.MappingProxyType(dict(categories))

    @property
    def categories(self) -> Mapping[str, Category]:
        return self._categories

    def __len__(self) -> int:
        return len(self._categories)

    def lookup(self, name: str) -> Optional[Category]:
        """Exact-match lookup of a category by name."""
        return self._categories.get(name)

    def lookup_keyword(self, word: str) -> Optional[str]:
        """Exact-match lookup of a keyword across all categories.

        When several categories declare the same keyword, the first declared
        category wins.
        """
        for category in self._categories.values():
            if word in category.items:
                return category.items[word]
        return None

    def all_keywords(self) -> Dict[str, str]:
        """Flatten every category into one keyword -> documentation mapping.

        Built fresh on each call. Duplicates resolve the same way as
        `lookup_keyword`.
        """
        keywords: Dict[str, str] = {}
        for category in self._categories.values():
            for keyword, documentation in category.items.items():
                keywords.setdefault(keyword, documentation)
        return keywords

    def duplicate_keywords(self) -> Dict[str, List[str]]:
        """Keywords declared in more than one category, with those categories in order."""
        owners: Dict[str, List[str]] = {}
        for category in self._categories.values():
            for keyword in category.items:
                owners.setdefault(keyword, []).append(category.name)
        return {k: names for k, names in owners.items() if len(names) > 1}

    def categories_with_prefix(self, prefix: str) -> List[Category]:
        """Categories whose name starts with `prefix`, in declaration order."""
        return [c for c in self._categories.values() if c.name.startswith(prefix)]


def _parse_category(name: str, data: Any) -> Category:
    if not isinstance(data, dict):
        raise KnowledgeBaseError(f"Category '{name}' must be an object")

    description = data.get("description")
    if not isinstance(description, str):
        raise KnowledgeBaseError(f"Category '{name}' has no string 'description'")

    items = data.get("items")
    if not isinstance(items, dict):
        raise KnowledgeBaseError(f"Category '{name}' has no object 'items'")
    for keyword, documentation in items.items():
        if not isinstance(documentation, str):
            raise KnowledgeBaseError(
                f"Documentation for '{keyword}' in category '{name}' must be a string"
            )

    return Category(
        name=name,
        description=description,
        items=types.MappingProxyType(dict(items)),
    )


def load_knowledge_base(payload: str) -> KnowledgeBase:
    """Parse a JSON dictionary payload into a `KnowledgeBase`."""
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise KnowledgeBaseError(f"Dictionary payload is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise KnowledgeBaseError("Dictionary payload must be a JSON object")

    return KnowledgeBase({name: _parse_category(name, value) for name, value in data.items()})


def load_default_knowledge_base() -> KnowledgeBase:
    """Load the dictionary named by `SAPF_LS_DICTIONARY`, or the embedded one."""
    path = os.getenv(DICTIONARY_ENV_VAR)
    if not path:
        return load_knowledge_base(sapf_dictionary.VALUES_JSON)

    try:
        with open(path, encoding="utf-8") as f:
            payload = f.read()
    except OSError as e:
        raise KnowledgeBaseError(f"Cannot read dictionary file {path}: {e}") from e
    return load_knowledge_base(payload)
