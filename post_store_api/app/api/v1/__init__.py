"""
Version 1 of the API.

Breaking changes to the post routes should be introduced in a new
version subpackage (e.g. ``v2``) rather than here.
"""
