"""User domain module.

This domain manages user identity records. Users are created only from a
verified identity profile (Google id token) and are immutable until deleted.
"""
