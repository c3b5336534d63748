"""Feature slices of segpath."""
