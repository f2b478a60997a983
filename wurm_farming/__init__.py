"""Wurm Online farming difficulty calculator."""
