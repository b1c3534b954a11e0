"""Prompt templates for AI design regeneration.

Messages use the content-part format (``[{"type": "text", "text": ...}]``)
accepted by OpenAI-compatible chat-completion endpoints.
"""

from __future__ import annotations

import json
from typing import Any


# ─── System Instruction ───

DESIGN_SYSTEM_PROMPT = """
Always return a valid Fabric.js JSON object (no extra text, no markdown).
Preserve all existing images from design.objects.
Image placement:
 - If only one image → make it a full-width hero/cover image at the top (40–50% of canvas height).
Text placement & style:
 - Headline → large, bold, top-centered or over hero image, eye-catching.
 - Highlights → mid section, professional font, aligned left or center, use spacing.
 - Call-to-action → bold, bottom area, with contrast color background or highlight.
Visual style:
 - Use emojis for engagement (🏡 ✨ 📍 📞).
 - Maintain proportional font sizes relative to canvas width/height.
 - Ensure good contrast (dark text on light bg or light on dark).
 - Avoid overlapping text with images.
 - Use modern fonts (sans-serif, clean).
Layout:
 - Balanced spacing between text blocks.
 - Grid or aligned arrangement for multiple images.
 - Minimalist, professional, modern aesthetic.
""".strip()


def _text(value: str) -> dict[str, str]:
    return {"type": "text", "text": value}


def regeneration_messages(
    design_json: dict[str, Any],
    user_prompt: str,
) -> list[dict[str, Any]]:
    """Return the chat messages for rewriting a design's canvas."""

    return [
        {"role": "system", "content": [_text(DESIGN_SYSTEM_PROMPT)]},
        {
            "role": "user",
            "content": [
                _text(
                    "Here is the user template canvas data: "
                    f"{json.dumps(design_json)}."
                ),
                _text(
                    "Also consider this user prompt when adjusting the template: "
                    f'"{user_prompt}"'
                ),
            ],
        },
    ]
