"""Service layer for work that spans several repositories or external systems."""
