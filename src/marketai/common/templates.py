"""Prompt templating helpers."""
from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

DEFAULT_CATEGORY = "slogan"


@dataclass(frozen=True)
class PromptTemplate:
    """Instruction and output format for one content category."""
    instruction: str
    format: str


PROMPT_TEMPLATES: Mapping[str, PromptTemplate] = MappingProxyType({
    "slogan": PromptTemplate(
        instruction=(
            "Create 3-5 catchy, memorable slogans that capture the essence of this "
            "product/service. Make them short, impactful, and brand-worthy."
        ),
        format="List each slogan on a new line with a bullet point.",
    ),
    "ad-copy": PromptTemplate(
        instruction=(
            "Write compelling advertisement copy that highlights key benefits, creates "
            "urgency, and drives action. Include a strong call-to-action."
        ),
        format="Provide a headline, main copy (2-3 paragraphs), and a clear call-to-action.",
    ),
    "product-description": PromptTemplate(
        instruction=(
            "Create a detailed, engaging product description that highlights features, "
            "benefits, and value proposition. Make it SEO-friendly and conversion-focused."
        ),
        format=(
            "Provide a structured description with key features, benefits, and "
            "specifications if applicable."
        ),
    ),
    "hashtags": PromptTemplate(
        instruction=(
            "Generate 15-20 relevant hashtags for social media marketing. Mix popular, "
            "niche, and branded hashtags for maximum reach."
        ),
        format="List hashtags separated by spaces, starting with most popular/relevant ones.",
    ),
    "email": PromptTemplate(
        instruction=(
            "Write a complete marketing email including subject line, body copy, and "
            "call-to-action. Make it engaging and conversion-focused."
        ),
        format=(
            "Provide: Subject Line, Email Body (with greeting, main content, and closing), "
            "and Call-to-Action."
        ),
    ),
})

PROMPT_SKELETON = """You are a professional marketing copywriter with expertise in creating high-converting content.

CONTENT TYPE: {label}

PRODUCT/SERVICE DESCRIPTION:
{description}

TASK: {instruction}

FORMAT: {format}

REQUIREMENTS:
- Make it professional and engaging
- Ensure it's suitable for the target audience
- Focus on benefits and value proposition
- Use persuasive language that drives action
- Keep the tone appropriate for marketing materials

Please provide only the requested content without any additional explanations or meta-commentary."""


def get_template(category: str) -> PromptTemplate:
    """Return the template for `category`, or the slogan template if unknown."""
    return PROMPT_TEMPLATES.get(category, PROMPT_TEMPLATES[DEFAULT_CATEGORY])


def category_label(category: str) -> str:
    """Display label for a category: first hyphen becomes a space, then uppercased."""
    return category.replace("-", " ", 1).upper()


def build_prompt(category: str, description: str) -> str:
    """
    Compose the model instruction for a content category.

    Args:
        category: Requested content category. Unknown values use the slogan template
            but keep their own label.
        description: Product/service description, inserted verbatim.

    Returns:
        Rendered prompt.
    """
    template = get_template(category)
    # str.format does not re-scan substituted values, so braces in the
    # description come through untouched.
    return PROMPT_SKELETON.format(
        label=category_label(category),
        description=description,
        instruction=template.instruction,
        format=template.format,
    )
