"""Presentation layer: catalog API and pytest plugin."""
