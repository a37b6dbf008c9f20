"""
Exposes the version of israelgrids
"""
__version__ = 'v0.1.0'
