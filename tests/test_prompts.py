"""Tests for prompt templates."""

import pytest

from route_sentinel.prompts import (
    ASSESSMENT_PROMPT,
    CHAT_ACKNOWLEDGEMENT_PROMPT,
    CHAT_CONTEXT_PROMPT,
    PORT_EXTRACTION_PROMPT,
    PromptTemplate,
)


def test_render_substitutes_parameters() -> None:
    template = PromptTemplate(name="t", template="Route: $route")
    assert template.render(route="Shanghai to Rotterdam") == "Route: Shanghai to Rotterdam"


def test_render_does_not_expand_parameter_text() -> None:
    template = PromptTemplate(name="t", template="Route: $route ($other)")
    rendered = template.render(route="$other {0} {route}", other="x")
    assert rendered == "Route: $other {0} {route} (x)"


def test_render_missing_parameter_raises() -> None:
    with pytest.raises(KeyError):
        PromptTemplate(name="t", template="$route and $headlines").render(route="A to B")


def test_port_extraction_prompt_requests_json() -> None:
    rendered = PORT_EXTRACTION_PROMPT.render(route="Busan to Long Beach")
    assert '"Busan to Long Beach"' in rendered
    assert '{"port1": "first port name", "port2": "second port name"}' in rendered


def test_assessment_prompt_lists_every_field() -> None:
    rendered = ASSESSMENT_PROMPT.render(route="A to B", headlines="- Headline (2026-10-01)")
    assert "Route: A to B" in rendered
    assert "- Headline (2026-10-01)" in rendered
    for key in (
        "verdict",
        "score",
        "reason",
        "factors",
        "shipping_line",
        "transit_time",
        "transhipment",
        "route_overview",
        "news_used",
    ):
        assert f'"{key}"' in rendered


def test_chat_templates_have_expected_placeholders() -> None:
    assert "$verdict" in CHAT_CONTEXT_PROMPT.template
    assert "$headlines" in CHAT_CONTEXT_PROMPT.template
    assert "$score/100" in CHAT_ACKNOWLEDGEMENT_PROMPT.template
