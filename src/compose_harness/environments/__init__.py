"""Container environments for integration tests."""
