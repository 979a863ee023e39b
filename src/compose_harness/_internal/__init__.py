"""Internal modules for compose_harness."""
