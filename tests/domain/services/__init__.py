"""Domain service tests."""
