"""Application settings tests."""
