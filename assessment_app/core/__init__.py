"""Qt-free assessment core: models, session state machine, scoring and report layout."""
