"""Prompt templates for the four positioning outputs and the sanitize pass."""
from typing import Dict, List

from models import PositioningRequest

POSITIONING_PROMPT = """Context: We're building {product_name}, targeted at {target_audience}. The product helps them {product_benefit}.

Task: Write ONE powerful, emotional Positioning Statement for {product_name}.

Requirements:
- One complete sentence, 25–35 words
- Explain the unique benefit to {target_audience}
- Contrast with competitors (reference: {competitors})
- End on a vision for the future
- Make it emotionally resonant and specific
- Speak to the customer's pain and aspiration
- Avoid buzzwords and corporate jargon

Output Format:
Return ONLY the positioning statement. No title, no formatting, no explanation. Just the single sentence.

Inputs:
- Target Audience: {target_audience}
- Top 3 Pain Points: {pain_points}
- Product Benefit: {product_benefit}
- Competitors: {competitors}
- Differentiators: {differentiators}"""

UVP_PROMPT = """Context: The product is {product_name} for {target_audience}, and solves {pain_points} in a way that {differentiators}.

Task: Write 3 unique value propositions in the style of David Ogilvy and April Dunford.

Requirements:
- Each must be a single, complete sentence under 25 words
- Emotionally compelling copy that speaks to customer pain and aspiration
- Strategically differentiated positioning that highlights what makes this unique
- Clear benefit statement that resonates immediately
- Avoid abstract claims - be visceral and specific

Output Format:
Return ONLY 3 plain text sentences separated by line breaks. No numbers. No bullet points. No labels. No formatting. Just 3 complete sentences.

Inputs:
- Product Name: {product_name}
- Target Audience: {target_audience}
- Top 3 Pain Points: {pain_points}
- Product Benefit: {product_benefit}
- Differentiators: {differentiators}"""

TAGLINE_PROMPT = """Context: The brand stands for {differentiators}. Our audience feels {pain_points}, and our product helps them {product_benefit}.

Task: Write a **Tagline** in the tone of classic advertising legends. It should be short (3–5 words), emotionally sticky, and worthy of living on a billboard.

Guidelines:
- Capture the soul of the product in the fewest words possible.
- Make it sound timeless — like it's always been true.
- Avoid trendy or techy language. Go for feeling and clarity.
- Never mention brand or competitor names.

Constraints:
Maximum 5 words each. Output 5 options, separated with ;

Inputs:
- Target Audience: {target_audience}
- Top pain: {pain_points}
- Core value: {product_benefit}
- Differentiator: {differentiators}"""

INSIGHTS_SYSTEM = (
    "You're a brand strategist trained in positioning frameworks (April Dunford) and copywriting "
    "(David Ogilvy, Eugene Schwartz). Provide strategic insights in a clear, thoughtful voice - think "
    "senior strategist giving clear feedback in a pitch workshop. No AI voice. Keep it under 100 words."
)

INSIGHTS_PROMPT = """Based on the following company input, provide a brief insight summary explaining:

1. What this company appears to be offering.
2. What emotional or strategic angle seems strongest (and why).
3. How the Positioning Statement, UVP, and Tagline might be refined based on this.
4. One key message or phrase they could elevate.
5. Optional: one thing they may be missing or underselling.

Company Information:
- Product Name: {product_name}
- Target Audience: {target_audience}
- Top 3 Pain Points: {pain_points}
- Product Benefit: {product_benefit}
- Key Competitors: {competitors}
- Differentiators: {differentiators}

Provide strategic insights in under 100 words."""

SANITIZE_SYSTEM = "You sanitize marketing copy by removing brand names."

SANITIZE_PROMPT = """If the text contains any brand or product names, rewrite it to remove or generalize them.

Use neutral contrast ("compared with typical [category] tools" or "versus manual spreadsheets"). Keep ≤55 words, plain language, same meaning, no buzzwords/superlatives.

Return plain text only.

Inputs:
- Draft: {draft}
- Possible brand list: {competitors}"""


def _fields(request: PositioningRequest) -> Dict[str, str]:
    return request.model_dump(by_alias=False)


def positioning_messages(request: PositioningRequest) -> List[Dict[str, str]]:
    return [{"role": "user", "content": POSITIONING_PROMPT.format(**_fields(request))}]


def uvp_messages(request: PositioningRequest) -> List[Dict[str, str]]:
    return [{"role": "user", "content": UVP_PROMPT.format(**_fields(request))}]


def tagline_messages(request: PositioningRequest) -> List[Dict[str, str]]:
    return [{"role": "user", "content": TAGLINE_PROMPT.format(**_fields(request))}]


def insights_messages(request: PositioningRequest) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": INSIGHTS_SYSTEM},
        {"role": "user", "content": INSIGHTS_PROMPT.format(**_fields(request))},
    ]


def sanitize_messages(draft: str, competitors: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": SANITIZE_SYSTEM},
        {"role": "user", "content": SANITIZE_PROMPT.format(draft=draft, competitors=competitors)},
    ]
