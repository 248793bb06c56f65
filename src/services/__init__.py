"""
Pure transform functions used by the Lambda handlers and the form pipeline.

This package contains the ordinal formatter, the weekday range counter, the
email/phone classifier and masker, plus the S3 archive for masked submissions.
"""

__all__ = ['ordinal', 'weekdays', 'obfuscation', 's3']
