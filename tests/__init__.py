"""Test suite for DDR Autoblob.

Test Structure:
- config/: Tests for application settings
- domain/: Tests for configuration loading
- generators/: Tests for C file generation
- infrastructure/: Tests for logging setup
- test_main.py: Command line tests

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run command line tests only
"""
