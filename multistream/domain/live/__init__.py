"""
Live streaming domain logic.

Includes:
- session: Session configuration against the external session store.
"""
