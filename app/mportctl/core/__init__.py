"""Core logic for mportctl: resolution, removal, version checks and search."""
