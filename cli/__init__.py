"""Panesnap command-line interface."""
