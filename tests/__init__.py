"""Tests for :mod:`graphoid`."""
