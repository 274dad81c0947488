from __future__ import annotations

from assessment_app.core.markdown_renderer import MarkdownRenderer
from assessment_app.styling.color_palette import ColorPalette, Theme
from assessment_app.styling.styles import Styles
from assessment_app.ui.question_renderer import option_label, render_question_html


def test_prompt_markdown_becomes_rich_text() -> None:
    html = render_question_html("A **power-driven** vessel", font_size=14)

    assert html.startswith('<div style="font-size: 14pt;')
    assert "<strong>power-driven</strong>" in html


def test_raw_html_in_prompt_is_escaped() -> None:
    html = MarkdownRenderer().render_fragment("<script>alert(1)</script>")

    assert "<script>" not in html


def test_empty_prompt_has_placeholder() -> None:
    assert "No content provided." in MarkdownRenderer().render_fragment("   ")


def test_option_labels_are_lettered() -> None:
    assert option_label(0, "Alter to starboard") == "A.  Alter to starboard"
    assert option_label(3, "") == "D.  (empty)"


def test_timer_style_switches_to_warning_colours() -> None:
    warning = Styles.get_timer_style(True)
    normal = Styles.get_timer_style(False)

    assert ColorPalette.ERROR.get(Theme.LIGHT) in warning
    assert ColorPalette.ERROR.get(Theme.LIGHT) not in normal


def test_verdict_style_follows_result() -> None:
    assert ColorPalette.SUCCESS.get(Theme.DARK) in Styles.get_verdict_style(True, Theme.DARK)
    assert ColorPalette.ERROR.get(Theme.DARK) in Styles.get_verdict_style(False, Theme.DARK)
