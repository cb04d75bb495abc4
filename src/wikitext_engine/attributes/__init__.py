"""Attribute tags, span storage, selection queries and the wikitext tagger."""

from .highlighter import DEFAULT_RULES, TagRule, WikitextTagger
from .models import (
    HEADING_ATTRIBUTES,
    Attribute,
    AttributeLookup,
    AttributeRun,
    AttributeSpan,
)
from .query import query_any, query_attribute, target_range
from .store import AttributeMap

__all__ = [
    "Attribute",
    "AttributeLookup",
    "AttributeMap",
    "AttributeRun",
    "AttributeSpan",
    "HEADING_ATTRIBUTES",
    "DEFAULT_RULES",
    "TagRule",
    "WikitextTagger",
    "query_any",
    "query_attribute",
    "target_range",
]
