"""Appwrite Starter.

Scaffolds Vite projects wired to an Appwrite backend and ships thin,
result-returning wrappers around the Appwrite Python SDK.
"""

__version__ = "0.1.0"
