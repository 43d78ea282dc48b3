"""Test suite for member-reflector.

Test Structure:
- config/: Tests for configuration management
- domain/models/: Tests for member descriptors, attributes and indexed properties
- domain/services/: Tests for reflection, enumeration and binding
- infrastructure/: Tests for logging setup
- utils/: Tests for class loading and member formatting

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
"""
