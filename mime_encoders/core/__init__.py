"""Scheme identity, error taxonomy, and buffered helpers.

WHY: Encoders, the registry, and the CLI all need the same notion of
"which encoding is this" and the same error types. Keeping them in core
avoids import cycles between the encoders package and its callers.

HOW: encoding.py defines the ContentEncoding enum, errors.py the caller
contract violations, pipeline.py the estimate/allocate/encode helpers
for whole buffers and chunked streams.

RULES:
- Nothing in core imports a concrete encoder
- Error types are raised before any output byte is written
"""
