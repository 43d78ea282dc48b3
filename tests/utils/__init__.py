"""Utilities module tests."""
