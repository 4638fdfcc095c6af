"""Mesh domain module.

Meshes are file-backed 3D assets owned by a user. A mesh has a name,
optional descriptions and one or more attached files.
"""
