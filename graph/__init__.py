"""Include graph model."""
