"""Issue tracker implementations."""
