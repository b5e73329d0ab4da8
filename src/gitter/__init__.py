"""Gitter: a minimal forum with a paginated post feed."""
