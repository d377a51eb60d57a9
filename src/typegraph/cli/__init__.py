"""TypeGraph CLI."""
