"""
comments_store.store

State container package.

Responsibilities:
- Action types and creators, slice reducers, reducer composition, and the store.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Call sites should build stores through `comments_store.bootstrap.create_store`.
