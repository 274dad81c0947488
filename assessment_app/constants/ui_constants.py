"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "COLREGs Master - Competency Assessment System"
WINDOW_MIN_WIDTH: int = 820
WINDOW_MIN_HEIGHT: int = 620

PROFILE_HEADING: str = "COLREGs Master"
PROFILE_SUBHEADING: str = "Competency Assessment System"
PROFILE_NAME_LABEL: str = "Full Name"
PROFILE_RANK_LABEL: str = "Rank"
PROFILE_VESSEL_LABEL: str = "Vessel Name"
PROFILE_NAME_PLACEHOLDER: str = "e.g. John Doe"
PROFILE_RANK_PLACEHOLDER: str = "e.g. Chief Officer"
PROFILE_VESSEL_PLACEHOLDER: str = "e.g. MV Pacific Star"
PROFILE_INFO_TEMPLATE: str = "Time Limit: {minutes} Minutes    Questions: {count} Scenarios"
PROFILE_SUBMIT_BUTTON: str = "Start Assessment"

GENERATING_HEADING: str = "Generating Scenarios..."
GENERATING_DETAIL: str = "Consulting Rule of the Road database"

QUIZ_PROGRESS_TEMPLATE: str = "Question {number} of {total}"
QUIZ_CANDIDATE_TEMPLATE: str = "{name}\n{rank} - {vessel}"

RESULTS_HEADING: str = "Assessment Complete"
RESULTS_THANKS_TEMPLATE: str = "Thank you, {name}."
RESULTS_SCORE_TEMPLATE: str = "{correct} / {total}"
RESULTS_PASSED: str = "COMPETENT"
RESULTS_FAILED: str = "NOT YET COMPETENT"
RESULTS_DOWNLOAD_BUTTON: str = "Download Official Report"
RESULTS_RESTART_BUTTON: str = "Retake Assessment"

REPORT_DIALOG_TITLE: str = "Save competency report"
REPORT_FILE_FILTER: str = "PDF files (*.pdf);;All files (*.*)"
REPORT_SAVED_TEMPLATE: str = "Report saved to {path}."
