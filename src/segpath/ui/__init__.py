"""User interfaces for segpath."""
