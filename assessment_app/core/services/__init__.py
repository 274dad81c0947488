"""Services used by the assessment session."""
