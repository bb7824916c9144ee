"""Bundled static data assets."""
