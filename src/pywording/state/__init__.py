"""Wording cache layer.

This package is the single source of truth for wording per locale. The
bootstrap loader and the remote sync pipeline write into it; the manager
resolves the active locale's wording from it.
"""
