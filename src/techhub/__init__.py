"""
Tech Hub API.

A small REST service for registering technology frameworks (name, current version
and a few optional descriptive fields) in a uniqueness-checked in-memory store.
"""
