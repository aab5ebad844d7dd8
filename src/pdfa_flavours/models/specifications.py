"""
PDF/A Specification Literals
=============================
Fixed identity data for the ISO 19005 (PDF/A) family and the ISO 32000
(PDF) series it builds on. The flavour enumerations in
:mod:`pdfa_flavours.models.flavour` are constructed from these values and
nothing else.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Sentinels
# ---------------------------------------------------------------------------

NONE = "none"
NONE_ID = 0

# ---------------------------------------------------------------------------
# Prefixes used by the derived names
# ---------------------------------------------------------------------------

ISO_PREFIX = "ISO "
PDFA_STRING_PREFIX = "PDF/A-"
LEVEL_PREFIX = "level "

# ---------------------------------------------------------------------------
# Standard series
# ---------------------------------------------------------------------------

ISO_19005_ID = 19005
ISO_19005_DESCRIPTION = (
    "Document management -- Electronic document file format for long-term preservation"
)

ISO_32000_ID = 32000
ISO_32000_DESCRIPTION = "Document management -- Portable document format"

# ---------------------------------------------------------------------------
# ISO 19005 parts
# ---------------------------------------------------------------------------

ISO_19005_1_PART = 1
ISO_19005_1_YEAR = "2005"
ISO_19005_1_DESCRIPTION = "Part 1: Use of PDF 1.4"

ISO_19005_2_PART = 2
ISO_19005_2_YEAR = "2011"
ISO_19005_2_DESCRIPTION = "Part 2: Use of ISO 32000-1"

ISO_19005_3_PART = 3
ISO_19005_3_YEAR = "2012"
ISO_19005_3_DESCRIPTION = "Part 3: Use of ISO 32000-1 with support for embedded files"

# ---------------------------------------------------------------------------
# Conformance levels
# ---------------------------------------------------------------------------

LEVEL_A_CODE = "a"  # accessible
LEVEL_B_CODE = "b"  # basic
LEVEL_U_CODE = "u"  # unicode
