"""Textual demo host; importing it requires the ``textual`` extra."""
