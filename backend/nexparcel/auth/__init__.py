# Auth package init
"""
NexParcel Backend — Authentication & Authorization
====================================================

What:  Bearer-token authentication and role-based access control.

Modules:
    - policy.py:  the route → required access table (single source of truth)
    - gate.py:    the dependency that enforces the table on every request
"""
