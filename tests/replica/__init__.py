"""Replica board tests: the page objects against a static copy of the board."""
