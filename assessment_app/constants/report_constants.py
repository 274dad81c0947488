"""Fixed text and A4 page geometry (millimetres) for the competency report."""

REPORT_BRAND: str = "CLdN"
REPORT_TITLE: str = "COLREGs Competency Report"
REPORT_ATTRIBUTION: str = "CLdN Competency Assurance System"
REPORT_SECTION_HEADING: str = "Detailed Assessment:"
REPORT_FILENAME_SUFFIX: str = "CLdN_COLREG_Report.pdf"
NO_ANSWER_MARKER: str = "No Answer (time expired)"
REPORT_DATE_FORMAT: str = "%d/%m/%Y"

PAGE_WIDTH_MM: float = 210.0
PAGE_HEIGHT_MM: float = 297.0
PAGE_LEFT_MM: float = 15.0
PAGE_RIGHT_MM: float = 200.0
PAGE_TOP_MARGIN_MM: float = 20.0
PAGE_CONTENT_BOTTOM_MM: float = 280.0
FOOTER_BASELINE_MM: float = 290.0
REVIEW_START_MM: float = 115.0

QUESTION_TEXT_WIDTH_MM: float = 180.0
EXPLANATION_TEXT_WIDTH_MM: float = 170.0
EXPLANATION_INDENT_MM: float = 5.0

# Standard Type 1 faces; reportlab measures them from its bundled AFM metrics.
REPORT_FONT: str = "Helvetica"
REPORT_FONT_BOLD: str = "Helvetica-Bold"
MM_PER_POINT: float = 25.4 / 72.0

NAVY: tuple[int, int, int] = (0, 51, 102)
BLACK: tuple[int, int, int] = (0, 0, 0)
PASS_GREEN: tuple[int, int, int] = (0, 128, 0)
CORRECT_GREEN: tuple[int, int, int] = (0, 150, 0)
FAIL_RED: tuple[int, int, int] = (200, 0, 0)
DETAIL_GREY: tuple[int, int, int] = (50, 50, 50)
NOTE_GREY: tuple[int, int, int] = (100, 100, 100)
FOOTER_GREY: tuple[int, int, int] = (150, 150, 150)
IDENTITY_FILL: tuple[int, int, int] = (245, 247, 250)
