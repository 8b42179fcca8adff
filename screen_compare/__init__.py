"""
Screen Compare - compare physical sizes of displays from diagonal and aspect ratio.
"""
__version__ = "0.1.0"
