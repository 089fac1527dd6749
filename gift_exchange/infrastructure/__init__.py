"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: In-memory repositories and the JSON seed loader
"""
