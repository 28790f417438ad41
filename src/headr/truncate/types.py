"""Shared constants for truncation."""

# Upper bound on a single read in byte mode.
BUFFER_SIZE = 64 * 1024

# Encoding used for lossy decoding of byte-mode output.
TEXT_ENCODING = "utf-8"
