"""Contentful entry size analysis."""
