"""
pdfa-flavours – PDF/A Flavour Taxonomy
=======================================
Closed enumeration of the PDF/A flavours defined by ISO 19005 parts 1-3:
which edition of the standard a document claims, at which conformance level.

Validation engines select rule sets by flavour, report generators print and
serialize it. This package only defines what a flavour is; it never decides
whether a document conforms to one.

Quick Start::

    from pdfa_flavours import PdfaFlavour, flavour_from_json

    flavour = PdfaFlavour.from_pdfaid(part="3", conformance="U")
    assert flavour is PdfaFlavour.PDFA_3_U

    print(flavour.standard.id)      # ISO 19005-3:2012
    print(flavour.standard.standard_name)  # PDF/A-3
    print(flavour.level)            # level u

    text = flavour.to_record().model_dump_json(by_alias=True)
    assert flavour_from_json(text) is flavour
"""

__version__ = "0.1.0"

# Core models
from .models.flavour import (
    IsoStandard,
    IsoStandardSeries,
    Level,
    PdfaFlavour,
)
from .models.records import (
    FlavourRecord,
    LevelRecord,
    SeriesRecord,
    StandardRecord,
    flavour_from_json,
)

# Errors
from .exceptions import FlavourError, UnknownFlavourError

# Validator
from .validator.consistency import (
    TaxonomyValidator,
    ValidationResult,
    ValidationIssue,
    Severity,
)

__all__ = [
    # Models
    "IsoStandard",
    "IsoStandardSeries",
    "Level",
    "PdfaFlavour",
    # Records
    "FlavourRecord",
    "LevelRecord",
    "SeriesRecord",
    "StandardRecord",
    "flavour_from_json",
    # Errors
    "FlavourError",
    "UnknownFlavourError",
    # Validation
    "TaxonomyValidator",
    "ValidationResult",
    "ValidationIssue",
    "Severity",
]
