"""Study Record backend: study session analytics."""
