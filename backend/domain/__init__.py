"""Domain layer for the medmod service.

Entities, value objects, ports and errors for users and meshes, free of
web-framework and database code.
"""
