"""Measurement services: boundaries, paths and zones."""
