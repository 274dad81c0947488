"""Question rendering utilities for the quiz view."""

from __future__ import annotations

from assessment_app.core.markdown_renderer import renderer


def render_question_html(prompt: str, font_size: int = 16) -> str:
    """Render a scenario prompt (Markdown) as rich text for a QLabel."""
    fragment = renderer.render_fragment(prompt)
    return f'<div style="font-size: {font_size}pt; line-height: 140%;">{fragment}</div>'


def option_label(index: int, option: str) -> str:
    """Button caption for an option, lettered A-D."""
    letter = chr(ord("A") + index)
    return f"{letter}.  {option or '(empty)'}"
