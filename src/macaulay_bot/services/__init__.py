"""
External service integrations.

Simple modules that wrap APIs and return data. No magic.

- http.py     - Shared ``requests`` session with retry + default timeout
- bluesky.py  - Bluesky (AT Protocol XRPC) login, blob upload, posting
"""
