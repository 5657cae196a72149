"""
Notekeeper
==========

MongoDB-backed persistence layer for notes.
"""
__version__ = "1.0.0"
