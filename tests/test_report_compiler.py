from __future__ import annotations

from datetime import date

from assessment_app.constants.report_constants import (
    EXPLANATION_INDENT_MM,
    EXPLANATION_TEXT_WIDTH_MM,
    FOOTER_BASELINE_MM,
    PAGE_CONTENT_BOTTOM_MM,
    PAGE_LEFT_MM,
    PAGE_WIDTH_MM,
    QUESTION_TEXT_WIDTH_MM,
    REPORT_ATTRIBUTION,
    REVIEW_START_MM,
)
from assessment_app.core.models import Profile, Question
from assessment_app.core.report_compiler import (
    BlockKind,
    ReportDocument,
    TextPrimitive,
    compile_report,
    report_filename,
    text_width_mm,
    wrap_text,
)
from assessment_app.core.scoring import compute_score
from tests.conftest import make_questions

PROFILE = Profile(name="Jane  Q Doe", rank="Second Officer", vessel="MV Humber")
REPORT_DATE = date(2025, 1, 31)


def _compile(questions: tuple[Question, ...], answers: list[int]) -> ReportDocument:
    return compile_report(PROFILE, questions, answers, compute_score(questions, answers), REPORT_DATE)


def _texts(document: ReportDocument, kind: BlockKind | None = None) -> list[str]:
    return [
        primitive.text
        for block in document.blocks
        if kind is None or block.kind is kind
        for primitive in block.primitives
        if isinstance(primitive, TextPrimitive)
    ]


def test_filename_collapses_whitespace() -> None:
    assert report_filename("A B") == "A_B_CLdN_COLREG_Report.pdf"
    assert report_filename("Jane  Q\tDoe") == "Jane_Q_Doe_CLdN_COLREG_Report.pdf"


def test_fixed_blocks_open_the_first_page() -> None:
    document = _compile(make_questions(), [0] * 10)

    assert document.kinds()[:4] == [BlockKind.HEADER, BlockKind.IDENTITY, BlockKind.SCORE, BlockKind.QUESTION]
    first_question = document.blocks[3]
    assert first_question.page == 1
    assert first_question.top == REVIEW_START_MM
    assert first_question.question_number == 1


def test_header_identity_and_score_text() -> None:
    document = _compile(make_questions(correct_index=0), [0] * 6 + [1] * 4)

    assert _texts(document, BlockKind.HEADER) == ["CLdN", "COLREGs Competency Report", "Date: 31/01/2025"]
    identity = _texts(document, BlockKind.IDENTITY)
    assert identity == ["Name:", "Jane  Q Doe", "Rank:", "Second Officer", "Vessel:", "MV Humber"]
    score = _texts(document, BlockKind.SCORE)
    assert score == ["Final Score: 6 / 10 (60%)", "RESULT: FAIL", "Detailed Assessment:"]


def test_every_page_ends_with_one_footer() -> None:
    document = _compile(make_questions(), [0] * 10)

    footers = [block for block in document.blocks if block.kind is BlockKind.FOOTER]
    breaks = [block for block in document.blocks if block.kind is BlockKind.PAGE_BREAK]
    assert document.page_count >= 2
    assert len(footers) == document.page_count
    assert len(breaks) == document.page_count - 1
    assert [footer.page for footer in footers] == list(range(1, document.page_count + 1))
    assert all(_texts(document, BlockKind.FOOTER)[i] == REPORT_ATTRIBUTION for i in range(len(footers)))
    assert document.kinds()[-1] is BlockKind.FOOTER


def test_question_blocks_fit_above_content_bottom() -> None:
    document = _compile(make_questions(), [0] * 10)

    questions = [block for block in document.blocks if block.kind is BlockKind.QUESTION]
    assert [block.question_number for block in questions] == list(range(1, 11))
    for block in questions:
        assert block.top + block.height <= PAGE_CONTENT_BOTTOM_MM
        for primitive in block.primitives:
            assert primitive.y < FOOTER_BASELINE_MM


def test_page_break_precedes_block_that_would_overflow() -> None:
    document = _compile(make_questions(), [0] * 10)

    blocks = list(document.blocks)
    for position, block in enumerate(blocks):
        if block.kind is BlockKind.PAGE_BREAK:
            previous_question = next(b for b in reversed(blocks[:position]) if b.kind is BlockKind.QUESTION)
            following = blocks[position + 1]
            assert following.kind is BlockKind.QUESTION
            assert following.page == block.page + 1
            assert previous_question.top + previous_question.height + 8.0 + following.height > PAGE_CONTENT_BOTTOM_MM


def test_unanswered_questions_use_no_answer_marker() -> None:
    questions = make_questions(correct_index=2)
    document = _compile(questions, [2, 1])

    texts = _texts(document, BlockKind.QUESTION)
    assert texts.count("Result: CORRECT") == 1
    assert texts.count("Result: INCORRECT") == 9
    assert "Your Answer: Option B2" in texts
    assert texts.count("Your Answer: No Answer (time expired)") == 8
    assert texts.count("Correct Answer: Option C1") == 1


def test_long_text_wraps_into_several_lines() -> None:
    long_prompt = " ".join(["restricted visibility"] * 30)
    questions = tuple(
        Question(prompt=long_prompt, options=("a", "b", "c", "d"), correct_index=0, explanation=long_prompt)
        for _ in range(10)
    )

    document = _compile(questions, [])

    first = next(block for block in document.blocks if block.kind is BlockKind.QUESTION)
    bold_lines = [p for p in first.primitives if isinstance(p, TextPrimitive) and p.bold]
    assert len(bold_lines) > 1
    assert " ".join(line.text for line in bold_lines) == f"Q1: {long_prompt}"
    baselines = [p.y for p in first.primitives]
    assert baselines == sorted(baselines)


def test_wrap_text_respects_measured_width() -> None:
    text = "MV ALPHA (RAM) SHOWS RED-WHITE-RED ALL-ROUND LIGHTS WHILE WWWW MMMM CROSSES " * 6

    for bold in (False, True):
        lines = wrap_text(text, width_mm=50, font_size=10, bold=bold)

        assert len(lines) > 1
        assert all(text_width_mm(line, 10, bold) <= 50 for line in lines)
        assert " ".join(lines) == text.strip()


def test_wrap_text_cuts_words_wider_than_the_column() -> None:
    lines = wrap_text("W" * 60, width_mm=40, font_size=12, bold=True)

    assert len(lines) > 1
    assert "".join(lines) == "W" * 60
    assert all(text_width_mm(line, 12, True) <= 40 for line in lines)


def test_wrap_text_keeps_empty_text_as_one_line() -> None:
    assert wrap_text("", 50, 10) == [""]


def test_compilation_is_deterministic() -> None:
    questions = make_questions()

    first = _compile(questions, [0, 1, 2])
    second = _compile(questions, [0, 1, 2])

    assert first == second


def test_capitalised_scenarios_stay_inside_the_text_column() -> None:
    scenario = (
        "MV ALPHA (RAM) SHOWS RED-WHITE-RED ALL-ROUND LIGHTS AND A WHITE MASTHEAD LIGHT, "
        "WHILE MV BRAVO (NUC) SHOWS TWO ALL-ROUND RED LIGHTS IN A VERTICAL LINE. "
    ) * 3
    questions = tuple(
        Question(prompt=scenario, options=("A", "B", "C", "D"), correct_index=0, explanation=scenario)
        for _ in range(10)
    )

    document = _compile(questions, [])

    for block in document.blocks:
        if block.kind is not BlockKind.QUESTION:
            continue
        for primitive in block.primitives:
            assert isinstance(primitive, TextPrimitive)
            width = text_width_mm(primitive.text, primitive.size, primitive.bold)
            if primitive.x == PAGE_LEFT_MM:
                assert width <= QUESTION_TEXT_WIDTH_MM
            else:
                assert primitive.x == PAGE_LEFT_MM + EXPLANATION_INDENT_MM
                assert width <= EXPLANATION_TEXT_WIDTH_MM
            assert primitive.x + width < PAGE_WIDTH_MM


def test_question_taller_than_a_page_continues_on_the_next() -> None:
    explanation = " ".join(["restricted visibility"] * 400)
    questions = (
        Question(prompt="Fog bank ahead.", options=("a", "b", "c", "d"), correct_index=0, explanation=explanation),
    ) + make_questions(count=9)[1:]

    document = _compile(questions, [0])

    first_parts = [block for block in document.blocks if block.question_number == 1]
    assert len(first_parts) >= 2
    assert len({block.page for block in first_parts}) == len(first_parts)
    notes = [p.text for block in first_parts for p in block.primitives if p.x == PAGE_LEFT_MM + EXPLANATION_INDENT_MM]
    assert " ".join(notes) == f"Note: {explanation}"
    for block in document.blocks:
        if block.kind is BlockKind.QUESTION:
            assert block.top + block.height <= PAGE_CONTENT_BOTTOM_MM
    footers = [block for block in document.blocks if block.kind is BlockKind.FOOTER]
    assert len(footers) == document.page_count
