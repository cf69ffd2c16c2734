"""Null-safe 32-bit hash combinators.

This package folds single values and ordered sequences into
deterministic signed 32-bit hash codes.
"""
