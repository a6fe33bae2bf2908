"""Internal modules for request-worker.

These are not intended for direct use in application code.

Modules:
    http - Transport protocol and the default httpx-backed transport
"""
