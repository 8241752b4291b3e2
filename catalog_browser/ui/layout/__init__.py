"""Layout builders: one function per panel of the page."""
