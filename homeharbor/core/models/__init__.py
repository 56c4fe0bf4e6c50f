"""API-facing models kept separate from the database entities."""
