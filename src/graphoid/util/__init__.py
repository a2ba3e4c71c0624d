"""Utilities for graphoid."""
