"""Business logic layer for explorer app.

This package decides what a click on a file or folder does:
- Classifying a record into a file action
- Building token-bearing links and editor handoff targets
- Executing actions against navigation and preview collaborators
- Display and share-link helpers

Nothing here performs I/O. Collaborators are passed in explicitly.
"""
