"""Static metadata describing the assessment application."""

APP_NAME = "COLREGs Master"
APP_VERSION = "0.1"
APP_ORGANIZATION = "CLdN"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "COLREGs Master is a timed competency assessment built with Qt. "
    "Each attempt draws ten freshly generated collision-regulation scenarios, "
    "scores them against a 70% pass mark and issues a printable PDF report."
)
