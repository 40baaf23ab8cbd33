"""Domain models for snowpatch."""
