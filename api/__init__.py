"""
HTTP API for the config comparator.
"""
