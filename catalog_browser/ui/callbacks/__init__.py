"""Callback registration, grouped by the part of the page they drive."""
