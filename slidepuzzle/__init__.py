"""
Ice slide puzzle core.

Board model, slide resolution and random puzzle generation.
"""
