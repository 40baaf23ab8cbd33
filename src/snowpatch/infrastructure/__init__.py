"""Infrastructure helpers backing the snowpatch application layer."""
