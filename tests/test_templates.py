from __future__ import annotations

import pytest

from marketai.common.schema import Category
from marketai.common.templates import (
    PROMPT_TEMPLATES,
    build_prompt,
    category_label,
    get_template,
)


@pytest.mark.parametrize("category", [c.value for c in Category])
def test_build_prompt_is_deterministic(category: str) -> None:
    desc = "Handmade soy candles, {lavender} & 100% natural"
    first = build_prompt(category, desc)
    assert first == build_prompt(category, desc)
    assert desc in first
    assert get_template(category).instruction in first
    assert get_template(category).format in first


def test_every_category_has_a_template() -> None:
    assert set(PROMPT_TEMPLATES) == {c.value for c in Category}


def test_email_prompt_contents() -> None:
    out = build_prompt("email", "A reusable coffee mug")
    assert "CONTENT TYPE: EMAIL" in out
    assert "A reusable coffee mug" in out
    assert PROMPT_TEMPLATES["email"].instruction in out
    assert "Subject Line" in out


def test_unknown_category_falls_back_to_slogan() -> None:
    out = build_prompt("nonsense", "A reusable coffee mug")
    slogan = PROMPT_TEMPLATES["slogan"]
    assert f"TASK: {slogan.instruction}" in out
    assert f"FORMAT: {slogan.format}" in out
    assert "CONTENT TYPE: NONSENSE" in out


def test_category_label_replaces_first_hyphen_only() -> None:
    assert category_label("product-description") == "PRODUCT DESCRIPTION"
    assert category_label("ad-copy") == "AD COPY"
    assert category_label("a-b-c") == "A B-C"


def test_prompt_layout() -> None:
    out = build_prompt("hashtags", "Trail running shoes")
    lines = out.splitlines()
    assert lines[0].startswith("You are a professional marketing copywriter")
    assert lines[2] == "CONTENT TYPE: HASHTAGS"
    assert lines[4] == "PRODUCT/SERVICE DESCRIPTION:"
    assert lines[5] == "Trail running shoes"
    assert out.count("\n- ") == 5
    assert out.endswith("without any additional explanations or meta-commentary.")


def test_templates_are_read_only() -> None:
    with pytest.raises(TypeError):
        PROMPT_TEMPLATES["slogan"] = PROMPT_TEMPLATES["email"]  # type: ignore[index]
