"""One panel per session state."""

from .generating_panel import GeneratingPanel
from .profile_panel import ProfilePanel
from .quiz_panel import QuizPanel
from .results_panel import ResultsPanel

__all__ = ["GeneratingPanel", "ProfilePanel", "QuizPanel", "ResultsPanel"]
