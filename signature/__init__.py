"""
Core Signature module.

Provides freehand signature capture: a Pillow raster driven by pointer
events, encoded to a transparent PNG after every completed stroke.
"""
