"""Geometry layouts computed ahead of rendering.

Each module turns a DTO from `mockdata` into positioned records (rectangles,
circles, bands, paths) that the chart renderers then draw.
"""
