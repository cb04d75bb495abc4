"""Regex-based wikitext tagger producing attribute spans.

This is the external syntax pass the formatting engine consumes: it never
parses nested constructs, it only marks single-line regions well enough for
toolbar state and toggle decisions. Every span covers the markup and its
content, matching what a highlighting text view attaches to its storage.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Pattern, Sequence

from wikitext_engine.runtime import telemetry

from .models import HEADING_ATTRIBUTES, Attribute
from .store import AttributeMap

Classifier = Callable[["re.Match[str]"], Optional[Attribute]]


def _fixed(attribute: Attribute) -> Classifier:
    return lambda match: attribute


def _heading(match: "re.Match[str]") -> Optional[Attribute]:
    return HEADING_ATTRIBUTES.get(len(match.group("marks")))


def _list(match: "re.Match[str]") -> Optional[Attribute]:
    marker = match.group("markers")[-1]
    return Attribute.LIST_BULLET if marker == "*" else Attribute.LIST_NUMBER


def _tag_pair(tag: str) -> Pattern[str]:
    return re.compile(rf"<{tag}>[^\n]*?</{tag}>")


@dataclass(frozen=True, slots=True)
class TagRule:
    name: str
    pattern: Pattern[str]
    classify: Classifier


DEFAULT_RULES: tuple[TagRule, ...] = (
    TagRule(
        "heading",
        re.compile(r"^(?P<marks>={2,6})[^\n]+?(?P=marks)[ \t]*$", re.MULTILINE),
        _heading,
    ),
    TagRule(
        "list",
        re.compile(r"^(?P<markers>[*#]+)[^\n]*$", re.MULTILINE),
        _list,
    ),
    TagRule(
        "bold_italic",
        re.compile(r"'''''(?!')[^\n]+?(?<!')'''''"),
        _fixed(Attribute.BOLD_ITALIC),
    ),
    TagRule(
        "bold",
        re.compile(r"(?<!')'''(?!')[^\n]+?(?<!')'''(?!')"),
        _fixed(Attribute.BOLD),
    ),
    TagRule(
        "italic",
        re.compile(r"(?<!')''(?!')[^\n]+?(?<!')''(?!')"),
        _fixed(Attribute.ITALIC),
    ),
    TagRule("template", re.compile(r"\{\{[^\n]*?\}\}"), _fixed(Attribute.TEMPLATE)),
    TagRule(
        "reference",
        re.compile(r"<ref(?:\s[^>\n]*)?>[^\n]*?</ref>|<ref(?:\s[^>\n]*)?/>"),
        _fixed(Attribute.REFERENCE),
    ),
    TagRule("superscript", _tag_pair("sup"), _fixed(Attribute.SUPERSCRIPT)),
    TagRule("subscript", _tag_pair("sub"), _fixed(Attribute.SUBSCRIPT)),
    TagRule("underline", _tag_pair("u"), _fixed(Attribute.UNDERLINE)),
    TagRule("strikethrough", _tag_pair("s"), _fixed(Attribute.STRIKETHROUGH)),
)


class WikitextTagger:
    def __init__(self, rules: Sequence[TagRule] = DEFAULT_RULES) -> None:
        self.rules = tuple(rules)

    def tag(self, text: str) -> AttributeMap:
        attributes = AttributeMap()
        with telemetry.span(
            "tagger::tag", component="attributes", metadata={"length": len(text)}
        ) as handle:
            for rule in self.rules:
                for match in rule.pattern.finditer(text):
                    attribute = rule.classify(match)
                    if attribute is not None:
                        attributes.add(attribute, match.start(), match.end())
            handle.add_metadata("spans", len(attributes))
        return attributes


__all__ = ["DEFAULT_RULES", "TagRule", "WikitextTagger"]
