"""COLREGs competency assessment application."""
