"""Text codecs for byte sequences.

hex_text.py holds the hexadecimal codec: encode, decode and
pretty_print.
"""
