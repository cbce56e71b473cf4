"""Generation and analysis services."""
