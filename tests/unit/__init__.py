"""Unit tests that run without a browser or network."""
