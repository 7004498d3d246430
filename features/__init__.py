"""Feature packages: image synthesis, markup synthesis and shared generation helpers."""
