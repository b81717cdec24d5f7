"""
Auth package for the Shortlink Platform API.

Provides HTTP Basic authentication and resolves each caller to a Principal
(username plus whether it holds elevated deletion rights).
"""
