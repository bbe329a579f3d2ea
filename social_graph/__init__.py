"""
Social Graph Explorer.

Loads an undirected friendship network from a flat file and answers
two questions about it: who an account's friends are, and how two
accounts are connected through a chain of friendships.
"""

__version__ = "0.1.0"
