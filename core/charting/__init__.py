"""Server-side chart rendering for the gallery.

Cards on the page are described by `GalleryEntry` objects rather than bespoke
view logic. This package holds the catalog schema and its validation, the
renderer registry, and the scales, shapes and layouts the renderers draw with.
Output is an SVG scene graph (`scene.Node`) serialized per request.
"""
