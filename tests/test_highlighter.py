from wikitext_engine.attributes import Attribute, AttributeSpan, WikitextTagger


def tag(text: str):
    return WikitextTagger().tag(text)


def test_bold_span_covers_markup() -> None:
    attributes = tag("a '''b''' c")

    assert attributes.spans(Attribute.BOLD) == (AttributeSpan(Attribute.BOLD, 2, 9),)
    assert attributes.spans(Attribute.ITALIC) == ()


def test_bold_italic_is_its_own_tag() -> None:
    attributes = tag("'''''x'''''")

    assert attributes.attributes() == frozenset({Attribute.BOLD_ITALIC})


def test_heading_levels_follow_marker_count() -> None:
    attributes = tag("==Title==\n===Sub===")

    assert attributes.spans(Attribute.HEADING_2) == (
        AttributeSpan(Attribute.HEADING_2, 0, 9),
    )
    assert attributes.spans(Attribute.HEADING_3) == (
        AttributeSpan(Attribute.HEADING_3, 10, 19),
    )


def test_list_style_comes_from_last_marker() -> None:
    attributes = tag("* one\n#* two\n# three")

    assert attributes.spans(Attribute.LIST_BULLET) == (
        AttributeSpan(Attribute.LIST_BULLET, 0, 5),
        AttributeSpan(Attribute.LIST_BULLET, 6, 12),
    )
    assert attributes.spans(Attribute.LIST_NUMBER) == (
        AttributeSpan(Attribute.LIST_NUMBER, 13, 20),
    )


def test_references_templates_and_html_tags() -> None:
    attributes = tag("x<ref name=a/>y {{cite}} <sup>2</sup> <s>old</s>")

    assert attributes.spans(Attribute.REFERENCE) == (
        AttributeSpan(Attribute.REFERENCE, 1, 14),
    )
    assert attributes.spans(Attribute.TEMPLATE) == (
        AttributeSpan(Attribute.TEMPLATE, 16, 24),
    )
    assert attributes.spans(Attribute.SUPERSCRIPT) == (
        AttributeSpan(Attribute.SUPERSCRIPT, 25, 37),
    )
    assert attributes.spans(Attribute.STRIKETHROUGH) == (
        AttributeSpan(Attribute.STRIKETHROUGH, 38, 48),
    )


def test_spans_never_cross_lines() -> None:
    attributes = tag("'''a\nb''' {{x\n}}")

    assert attributes.spans(Attribute.BOLD) == ()
    assert attributes.spans(Attribute.TEMPLATE) == ()
