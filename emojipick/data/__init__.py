"""Bundled baseline annotations and the generated emoji index."""
