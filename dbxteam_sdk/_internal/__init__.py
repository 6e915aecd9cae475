"""Internal modules for the dbxteam SDK.

WARNING: This package holds the protocol machinery behind ``TeamClient``.
It is not intended for direct use in application code.

Modules:
    dispatch - Route descriptors and the route dispatcher
    jobs - Async job launch/poll protocol
    pagination - Cursor continuation protocol
    http - Shared HTTP client configuration
"""
