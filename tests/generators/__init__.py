"""Generator tests."""
