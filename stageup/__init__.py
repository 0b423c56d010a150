"""Upgrade helpers for data-pipeline stage configurations."""
