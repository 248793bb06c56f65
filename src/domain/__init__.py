"""
Domain layer for the form field utilities.

This layer contains:
- Data models (validated value types and result types)
- Error taxonomy (one exception per failure mode)
- Business logic (form submission masking pipeline)
"""
