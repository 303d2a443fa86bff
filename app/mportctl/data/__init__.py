"""Bundled data files for mportctl."""
