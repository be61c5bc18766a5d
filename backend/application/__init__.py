"""
Application Layer - use cases over the record store.

Managers take an AppState, perform their writes, reload the affected
collection and return the new AppState.
"""
