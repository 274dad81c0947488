"""Layout of the competency report as a renderer-agnostic document model.

The compiler decides everything about the page: text wrapping, vertical
placement and page breaks. A renderer only walks the resulting blocks and
paints each primitive at the coordinates it carries (millimetres from the
top-left corner of an A4 page, text ``y`` being the baseline).

Text is measured with reportlab's built-in Helvetica metrics rather than the
fonts of the rendering machine, so the same inputs always give the same block
sequence.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
import re
from typing import Sequence

from reportlab.pdfbase.pdfmetrics import stringWidth

from assessment_app.constants.report_constants import (
    BLACK,
    CORRECT_GREEN,
    DETAIL_GREY,
    EXPLANATION_INDENT_MM,
    EXPLANATION_TEXT_WIDTH_MM,
    FAIL_RED,
    FOOTER_BASELINE_MM,
    FOOTER_GREY,
    IDENTITY_FILL,
    MM_PER_POINT,
    NAVY,
    NO_ANSWER_MARKER,
    NOTE_GREY,
    PAGE_CONTENT_BOTTOM_MM,
    PAGE_LEFT_MM,
    PAGE_RIGHT_MM,
    PAGE_TOP_MARGIN_MM,
    PAGE_WIDTH_MM,
    PASS_GREEN,
    QUESTION_TEXT_WIDTH_MM,
    REPORT_ATTRIBUTION,
    REPORT_BRAND,
    REPORT_DATE_FORMAT,
    REPORT_FONT,
    REPORT_FONT_BOLD,
    REPORT_FILENAME_SUFFIX,
    REPORT_SECTION_HEADING,
    REPORT_TITLE,
    REVIEW_START_MM,
)
from assessment_app.core.models import Profile, Question, Score

Color = tuple[int, int, int]

_QUESTION_FONT_SIZE = 12
_DETAIL_FONT_SIZE = 10
_QUESTION_LEADING_MM = 5.0
_DETAIL_LEADING_MM = 5.0
_NOTE_LEADING_MM = 4.0
_FIRST_BASELINE_MM = 4.0
_QUESTION_GAP_MM = 8.0
_HEADER_HEIGHT_MM = 45.0
_IDENTITY_HEIGHT_MM = 45.0
_WHITESPACE_RUN = re.compile(r"\s+")


class BlockKind(Enum):
    """Kinds of layout block in a report document."""

    HEADER = "header"
    IDENTITY = "identity"
    SCORE = "score"
    QUESTION = "question"
    FOOTER = "footer"
    PAGE_BREAK = "page_break"


class TextAlign(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class TextPrimitive:
    x: float
    y: float
    text: str
    size: float
    bold: bool = False
    color: Color = BLACK
    align: TextAlign = TextAlign.LEFT


@dataclass(frozen=True, slots=True)
class LinePrimitive:
    x1: float
    y1: float
    x2: float
    y2: float
    width: float = 0.5
    color: Color = BLACK


@dataclass(frozen=True, slots=True)
class RectPrimitive:
    x: float
    y: float
    width: float
    height: float
    color: Color


Primitive = TextPrimitive | LinePrimitive | RectPrimitive


@dataclass(frozen=True, slots=True)
class ReportBlock:
    """A placed group of primitives that belongs to exactly one page."""

    kind: BlockKind
    page: int
    top: float
    height: float
    primitives: tuple[Primitive, ...] = ()
    question_number: int | None = None


@dataclass(frozen=True, slots=True)
class ReportDocument:
    """Write-once, fully paginated report handed to a renderer."""

    filename: str
    page_count: int
    blocks: tuple[ReportBlock, ...]

    def kinds(self) -> list[BlockKind]:
        return [block.kind for block in self.blocks]

    def blocks_on_page(self, page: int) -> list[ReportBlock]:
        return [block for block in self.blocks if block.page == page and block.kind is not BlockKind.PAGE_BREAK]


def report_filename(name: str) -> str:
    """Candidate name with whitespace runs collapsed to underscores plus the report suffix."""
    collapsed = _WHITESPACE_RUN.sub("_", name)
    return f"{collapsed}_{REPORT_FILENAME_SUFFIX}"


def text_width_mm(text: str, font_size: float, bold: bool = False) -> float:
    """Width of ``text`` set in Helvetica at ``font_size`` points."""
    font_name = REPORT_FONT_BOLD if bold else REPORT_FONT
    return stringWidth(text, font_name, font_size) * MM_PER_POINT


def wrap_text(text: str, width_mm: float, font_size: float, bold: bool = False) -> list[str]:
    """Split ``text`` into lines no wider than ``width_mm`` at ``font_size`` points."""
    lines: list[str] = []
    for paragraph in text.splitlines() or [""]:
        line = ""
        for word in paragraph.split():
            candidate = f"{line} {word}" if line else word
            if text_width_mm(candidate, font_size, bold) <= width_mm:
                line = candidate
                continue
            if line:
                lines.append(line)
            line = word
            # A single word wider than the column is cut where it stops fitting.
            while len(line) > 1 and text_width_mm(line, font_size, bold) > width_mm:
                cut = _fitting_prefix_length(line, width_mm, font_size, bold)
                lines.append(line[:cut])
                line = line[cut:]
        lines.append(line)
    return lines


def _fitting_prefix_length(word: str, width_mm: float, font_size: float, bold: bool) -> int:
    cut = len(word) - 1
    while cut > 1 and text_width_mm(word[:cut], font_size, bold) > width_mm:
        cut -= 1
    return cut


def compile_report(
    profile: Profile,
    questions: Sequence[Question],
    answers: Sequence[int],
    score: Score,
    report_date: date,
) -> ReportDocument:
    """Lay out the full report for a finished attempt."""
    layout = _PageLayout()
    layout.place_fixed(BlockKind.HEADER, _HEADER_HEIGHT_MM, _header_primitives(layout.cursor, report_date))
    layout.place_fixed(BlockKind.IDENTITY, _IDENTITY_HEIGHT_MM, _identity_primitives(layout.cursor, profile))
    layout.place_fixed(BlockKind.SCORE, REVIEW_START_MM - layout.cursor, _score_primitives(layout.cursor, score))

    for index, question in enumerate(questions):
        answer = answers[index] if index < len(answers) else None
        layout.place_flowing(index + 1, _question_lines(index + 1, question, answer))

    blocks = layout.finish()
    return ReportDocument(
        filename=report_filename(profile.name),
        page_count=layout.page,
        blocks=tuple(blocks),
    )


class _PageLayout:
    """Accumulates blocks top-down and inserts page breaks."""

    def __init__(self) -> None:
        self.page = 1
        self.cursor = 0.0
        self._blocks: list[ReportBlock] = []

    def place_fixed(self, kind: BlockKind, height: float, primitives: tuple[Primitive, ...]) -> None:
        self._blocks.append(
            ReportBlock(kind=kind, page=self.page, top=self.cursor, height=height, primitives=primitives)
        )
        self.cursor += height

    def place_flowing(self, number: int, lines: list[_Line]) -> None:
        """Place a question block, moving it to a fresh page when it does not fit.

        A block taller than a whole page is split: each page takes the lines
        that fit and the rest continue on the next page under the same number.
        """
        remaining = lines
        while remaining:
            if self.cursor + _block_height(remaining) <= PAGE_CONTENT_BOTTOM_MM:
                self._place_question(number, remaining)
                return
            if self.cursor > PAGE_TOP_MARGIN_MM:
                self._break_page()
                continue
            count = self._lines_that_fit(remaining)
            self._place_question(number, remaining[:count])
            remaining = remaining[count:]
            self._break_page()

    def _lines_that_fit(self, lines: list[_Line]) -> int:
        bottom = self.cursor + _FIRST_BASELINE_MM
        count = 0
        for line in lines:
            bottom += line.advance
            if bottom > PAGE_CONTENT_BOTTOM_MM:
                break
            count += 1
        return max(1, count)

    def _place_question(self, number: int, lines: list[_Line]) -> None:
        top = self.cursor
        height = _block_height(lines)
        baseline = top + _FIRST_BASELINE_MM
        primitives: list[Primitive] = []
        for line in lines:
            primitives.append(
                TextPrimitive(
                    x=line.x,
                    y=baseline,
                    text=line.text,
                    size=line.size,
                    bold=line.bold,
                    color=line.color,
                )
            )
            baseline += line.advance

        self._blocks.append(
            ReportBlock(
                kind=BlockKind.QUESTION,
                page=self.page,
                top=top,
                height=height,
                primitives=tuple(primitives),
                question_number=number,
            )
        )
        self.cursor = top + height + _QUESTION_GAP_MM

    def finish(self) -> list[ReportBlock]:
        self._blocks.append(self._footer())
        return self._blocks

    def _break_page(self) -> None:
        self._blocks.append(self._footer())
        self._blocks.append(ReportBlock(kind=BlockKind.PAGE_BREAK, page=self.page, top=0.0, height=0.0))
        self.page += 1
        self.cursor = PAGE_TOP_MARGIN_MM

    def _footer(self) -> ReportBlock:
        return ReportBlock(
            kind=BlockKind.FOOTER,
            page=self.page,
            top=FOOTER_BASELINE_MM - _FIRST_BASELINE_MM,
            height=_FIRST_BASELINE_MM + 2.0,
            primitives=(
                TextPrimitive(
                    x=PAGE_WIDTH_MM / 2,
                    y=FOOTER_BASELINE_MM,
                    text=REPORT_ATTRIBUTION,
                    size=10,
                    color=FOOTER_GREY,
                    align=TextAlign.CENTER,
                ),
            ),
        )


@dataclass(frozen=True, slots=True)
class _Line:
    text: str
    x: float
    size: float
    advance: float
    bold: bool = False
    color: Color = BLACK


def _block_height(lines: Sequence[_Line]) -> float:
    return _FIRST_BASELINE_MM + sum(line.advance for line in lines)


def _question_lines(number: int, question: Question, answer: int | None) -> list[_Line]:
    answered = answer is not None and 0 <= answer < len(question.options)
    is_correct = answered and answer == question.correct_index
    user_answer = question.options[answer] if answered else NO_ANSWER_MARKER

    lines: list[_Line] = []

    question_text = wrap_text(
        f"Q{number}: {question.prompt}", QUESTION_TEXT_WIDTH_MM, _QUESTION_FONT_SIZE, bold=True
    )
    for position, text in enumerate(question_text):
        last = position == len(question_text) - 1
        lines.append(
            _Line(
                text=text,
                x=PAGE_LEFT_MM,
                size=_QUESTION_FONT_SIZE,
                advance=_QUESTION_LEADING_MM + (2.0 if last else 0.0),
                bold=True,
            )
        )

    lines.append(
        _Line(
            text="Result: CORRECT" if is_correct else "Result: INCORRECT",
            x=PAGE_LEFT_MM,
            size=_QUESTION_FONT_SIZE,
            advance=7.0,
            color=CORRECT_GREEN if is_correct else FAIL_RED,
        )
    )

    for label, value, trailing in (
        ("Your Answer", user_answer, 0.0),
        ("Correct Answer", question.correct_option, 1.0),
    ):
        wrapped = wrap_text(f"{label}: {value}", QUESTION_TEXT_WIDTH_MM, _DETAIL_FONT_SIZE)
        for position, text in enumerate(wrapped):
            last = position == len(wrapped) - 1
            lines.append(
                _Line(
                    text=text,
                    x=PAGE_LEFT_MM,
                    size=_DETAIL_FONT_SIZE,
                    advance=_DETAIL_LEADING_MM + (trailing if last else 0.0),
                    color=DETAIL_GREY,
                )
            )

    for text in wrap_text(f"Note: {question.explanation}", EXPLANATION_TEXT_WIDTH_MM, _DETAIL_FONT_SIZE):
        lines.append(
            _Line(
                text=text,
                x=PAGE_LEFT_MM + EXPLANATION_INDENT_MM,
                size=_DETAIL_FONT_SIZE,
                advance=_NOTE_LEADING_MM,
                color=NOTE_GREY,
            )
        )

    return lines


def _header_primitives(top: float, report_date: date) -> tuple[Primitive, ...]:
    return (
        TextPrimitive(x=PAGE_LEFT_MM, y=top + 25.0, text=REPORT_BRAND, size=40, bold=True, color=NAVY),
        TextPrimitive(
            x=PAGE_RIGHT_MM,
            y=top + 25.0,
            text=REPORT_TITLE,
            size=22,
            bold=True,
            color=NAVY,
            align=TextAlign.RIGHT,
        ),
        LinePrimitive(x1=PAGE_LEFT_MM, y1=top + 35.0, x2=PAGE_RIGHT_MM, y2=top + 35.0, width=1.0, color=NAVY),
        TextPrimitive(
            x=PAGE_RIGHT_MM,
            y=top + 41.0,
            text=f"Date: {report_date.strftime(REPORT_DATE_FORMAT)}",
            size=10,
            color=DETAIL_GREY,
            align=TextAlign.RIGHT,
        ),
    )


def _identity_primitives(top: float, profile: Profile) -> tuple[Primitive, ...]:
    primitives: list[Primitive] = [
        RectPrimitive(
            x=PAGE_LEFT_MM,
            y=top,
            width=PAGE_RIGHT_MM - PAGE_LEFT_MM,
            height=_IDENTITY_HEIGHT_MM - 7.0,
            color=IDENTITY_FILL,
        )
    ]
    rows = (("Name:", profile.name), ("Rank:", profile.rank), ("Vessel:", profile.vessel))
    for row, (label, value) in enumerate(rows):
        baseline = top + 11.0 + row * 10.0
        primitives.append(TextPrimitive(x=25.0, y=baseline, text=label, size=12))
        primitives.append(TextPrimitive(x=55.0, y=baseline, text=value, size=12, bold=True))
    return tuple(primitives)


def _score_primitives(top: float, score: Score) -> tuple[Primitive, ...]:
    return (
        TextPrimitive(
            x=PAGE_LEFT_MM,
            y=top + 8.0,
            text=f"Final Score: {score.correct_count} / {score.total_count} ({score.percentage}%)",
            size=14,
            bold=True,
            color=NAVY,
        ),
        TextPrimitive(
            x=PAGE_RIGHT_MM,
            y=top + 8.0,
            text="RESULT: PASS" if score.passed else "RESULT: FAIL",
            size=16,
            bold=True,
            color=PASS_GREEN if score.passed else FAIL_RED,
            align=TextAlign.RIGHT,
        ),
        TextPrimitive(x=PAGE_LEFT_MM, y=top + 20.0, text=REPORT_SECTION_HEADING, size=14, bold=True, color=NAVY),
    )
