"""Utility helpers shared across Folio."""
