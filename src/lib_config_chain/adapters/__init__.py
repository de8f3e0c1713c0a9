"""Adapters that answer lookups from concrete configuration sources."""
