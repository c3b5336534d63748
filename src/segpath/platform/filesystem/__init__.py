"""Filesystem adapter exports.

Where: platform/filesystem/__init__.py
What: Re-export the adapter backed by the host operating system.
Why: Provide a single canonical import path for the OS collaborator.
"""

from __future__ import annotations

from .local import DIRECTORY_MODE, LocalFilesystemAdapter

__all__ = ["DIRECTORY_MODE", "LocalFilesystemAdapter"]
