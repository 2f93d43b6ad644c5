"""Utility constants for ralgebra.

Integer widths are in bits and mirror the machine index types ranges are
most often defined over.
"""

# Integer widths (bits)
BYTE = 8
SHORT = 16
WORD = 32
LONG = 64
WIDE = 128

# Pointer-sized unsigned integers are the default index type
POINTER_WIDTH = LONG
