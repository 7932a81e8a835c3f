"""Value model and term shape conversion.

WHY: The converter and the codec agree on what a scalar, a text value,
a sequence and a tuple are. That agreement lives here, next to the
converter that depends on it most.

HOW: terms.py defines the value model and classify(); shape.py
implements to_internal / to_external on top of it.

RULES:
- terms.py imports nothing else from the package
- shape.py is total: every input produces an output
"""
