"""Renderer payload helpers.

Chart specifications are assembled by the `analysis` package; this package
converts them into the option format the browser-side renderer consumes.
"""
