"""Career Pay CLI."""
