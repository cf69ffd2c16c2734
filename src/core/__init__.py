"""Shared foundations.

This package holds constants, errors, configuration and logging
used by the hashing layer and the public import surface.
"""
