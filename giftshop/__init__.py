"""Gift shop product catalog service."""
