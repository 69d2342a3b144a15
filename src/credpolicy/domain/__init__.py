"""Domain layer for credpolicy.

Pure policy logic with no dependencies on hashing or token libraries.
"""
