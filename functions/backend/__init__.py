"""
Backend package for the LeafLine functions.

Provides settings and the document store abstraction shared by the callables
and the Firestore reactions.
"""
