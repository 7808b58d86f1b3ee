"""Registry build pipeline stages."""
