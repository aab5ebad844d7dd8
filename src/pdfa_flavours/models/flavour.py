"""
PDF/A Flavours – Core Model
============================
Closed enumerations describing which edition and conformance level of
ISO 19005 (PDF/A) a document claims to satisfy.

Four layers, composed bottom-up::

    PdfaFlavour ──> IsoStandard ──> IsoStandardSeries
              └──> Level

Every member is created once at import time and all derived strings are
computed in the member's ``__init__``. Members are singletons: two flavours
sharing a standard share the *same* ``IsoStandard`` object.

Example::

    from pdfa_flavours import PdfaFlavour

    flavour = PdfaFlavour.by_flavour_id("2b")
    flavour.standard.id        # 'ISO 19005-2:2011'
    flavour.level.code         # 'b'
    str(flavour.level)         # 'level b'
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from . import specifications as specs
from ..exceptions import UnknownFlavourError

if TYPE_CHECKING:
    from .records import FlavourRecord, LevelRecord, SeriesRecord, StandardRecord

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Standard series
# ---------------------------------------------------------------------------


class IsoStandardSeries(Enum):
    """ISO standard families referenced by the taxonomy."""

    #: Special identifier for the none case
    NONE = (specs.NONE_ID, specs.NONE)
    #: PDF/A
    ISO_19005 = (specs.ISO_19005_ID, specs.ISO_19005_DESCRIPTION)
    #: PDF 1.7
    ISO_32000 = (specs.ISO_32000_ID, specs.ISO_32000_DESCRIPTION)

    def __init__(self, series_id: int, description: str) -> None:
        self.id = series_id
        self.description = description
        self.series_name = f"{specs.ISO_PREFIX}{series_id}"

    def __str__(self) -> str:
        return f"{self.series_name} {self.description}"

    @classmethod
    def from_id(cls, series_id: int) -> "IsoStandardSeries":
        """Return the series with the given numeric ISO id."""
        for series in cls:
            if series.id == series_id:
                return series
        logger.debug("No standard series with id %r", series_id)
        raise UnknownFlavourError("series", series_id)

    def to_record(self) -> "SeriesRecord":
        from .records import SeriesRecord

        return SeriesRecord(id=self.id, name=self.series_name, description=self.description)

    def to_dict(self) -> dict[str, Any]:
        return self.to_record().model_dump(by_alias=True)


# ---------------------------------------------------------------------------
# Standard parts
# ---------------------------------------------------------------------------


class IsoStandard(Enum):
    """
    Parts of ISO 19005, one per PDF/A edition.

    ``id`` is the ISO reference (``"ISO 19005-2:2011"``) and
    ``standard_name`` the familiar short form (``"PDF/A-2"``).
    """

    #: Special identifier for the none case
    NONE = (IsoStandardSeries.NONE, specs.NONE_ID, specs.NONE, specs.NONE)
    #: PDF/A-1
    ISO_19005_1 = (
        IsoStandardSeries.ISO_19005,
        specs.ISO_19005_1_PART,
        specs.ISO_19005_1_YEAR,
        specs.ISO_19005_1_DESCRIPTION,
    )
    #: PDF/A-2
    ISO_19005_2 = (
        IsoStandardSeries.ISO_19005,
        specs.ISO_19005_2_PART,
        specs.ISO_19005_2_YEAR,
        specs.ISO_19005_2_DESCRIPTION,
    )
    #: PDF/A-3
    ISO_19005_3 = (
        IsoStandardSeries.ISO_19005,
        specs.ISO_19005_3_PART,
        specs.ISO_19005_3_YEAR,
        specs.ISO_19005_3_DESCRIPTION,
    )

    def __init__(
        self,
        series: IsoStandardSeries,
        part_number: int,
        year: str,
        description: str,
    ) -> None:
        self.series = series
        self.part_number = part_number
        self.year = year
        self.description = description
        self.id = f"{series.series_name}-{part_number}:{year}"
        self.standard_name = f"{specs.PDFA_STRING_PREFIX}{part_number}"

    def __str__(self) -> str:
        return (
            f"{self.id} {self.series.description} -- "
            f"{self.description} {self.standard_name}"
        )

    @classmethod
    def from_part_number(cls, part: int | str) -> "IsoStandard":
        """
        Return the standard for a part number.

        Accepts an int or a numeric string such as the value of the XMP
        ``pdfaid:part`` property. Part 0 is the ``NONE`` sentinel. Floats,
        bools and other types are rejected rather than truncated.
        """
        if isinstance(part, bool) or not isinstance(part, (int, str)):
            logger.debug("Part number %r is not an int or string", part)
            raise UnknownFlavourError("standard", part)
        try:
            number = int(part)
        except (TypeError, ValueError):
            logger.debug("Part number %r is not numeric", part)
            raise UnknownFlavourError("standard", part) from None
        for standard in cls:
            if standard.part_number == number:
                return standard
        logger.debug("No ISO 19005 part %d", number)
        raise UnknownFlavourError("standard", part)

    def to_record(self) -> "StandardRecord":
        from .records import StandardRecord

        return StandardRecord(
            id=self.id,
            partNumber=self.part_number,
            year=self.year,
            name=self.standard_name,
            description=self.description,
            series=self.series.to_record(),
        )

    def to_dict(self) -> dict[str, Any]:
        return self.to_record().model_dump(by_alias=True)


# ---------------------------------------------------------------------------
# Conformance levels
# ---------------------------------------------------------------------------


class Level(str, Enum):
    """PDF/A conformance levels A, B and U."""

    #: Special identifier for the none case
    NONE = specs.NONE
    #: Level A (accessible)
    LEVEL_A = specs.LEVEL_A_CODE
    #: Level B (basic)
    LEVEL_B = specs.LEVEL_B_CODE
    #: Level U (unicode)
    LEVEL_U = specs.LEVEL_U_CODE

    def __init__(self, code: str) -> None:
        self.code = code
        self.full_name = f"{specs.LEVEL_PREFIX}{code}"

    def __str__(self) -> str:
        return self.full_name

    @classmethod
    def from_code(cls, code: str) -> "Level":
        """Case-insensitive lookup by level code ("a", "B", "u", "none")."""
        normalized = code.strip().lower() if isinstance(code, str) else None
        for level in cls:
            if level.code == normalized:
                return level
        logger.debug("No conformance level with code %r", code)
        raise UnknownFlavourError("level", code)

    def to_record(self) -> "LevelRecord":
        from .records import LevelRecord

        return LevelRecord(code=self.code, fullName=self.full_name)

    def to_dict(self) -> dict[str, Any]:
        return self.to_record().model_dump(by_alias=True)


# ---------------------------------------------------------------------------
# Flavours
# ---------------------------------------------------------------------------


class PdfaFlavour(Enum):
    """
    PDF/A flavours, composed of a standard part and a conformance level.

    Only the pairs listed here exist. Passing any other
    ``(IsoStandard, Level)`` pair to ``PdfaFlavour(...)`` raises
    ``ValueError``; use :meth:`from_parts` for a lookup that raises
    :class:`~pdfa_flavours.exceptions.UnknownFlavourError` instead.
    """

    #: Special identifier for the none case
    NONE = (IsoStandard.NONE, Level.NONE)
    #: PDF/A-1 level A
    PDFA_1_A = (IsoStandard.ISO_19005_1, Level.LEVEL_A)
    #: PDF/A-1 level B
    PDFA_1_B = (IsoStandard.ISO_19005_1, Level.LEVEL_B)
    #: PDF/A-2 level A
    PDFA_2_A = (IsoStandard.ISO_19005_2, Level.LEVEL_A)
    #: PDF/A-2 level B
    PDFA_2_B = (IsoStandard.ISO_19005_2, Level.LEVEL_B)
    #: PDF/A-3 level A
    PDFA_3_A = (IsoStandard.ISO_19005_3, Level.LEVEL_A)
    #: PDF/A-3 level B
    PDFA_3_B = (IsoStandard.ISO_19005_3, Level.LEVEL_B)
    #: PDF/A-3 level U
    PDFA_3_U = (IsoStandard.ISO_19005_3, Level.LEVEL_U)

    def __init__(self, standard: IsoStandard, level: Level) -> None:
        self.standard = standard
        self.level = level
        self.display = str(standard) + " " + str(level)
        if standard is IsoStandard.NONE:
            self.flavour_id = specs.NONE
        else:
            self.flavour_id = f"{standard.part_number}{level.code}"

    def __str__(self) -> str:
        return self.display

    def __repr__(self) -> str:
        return f"<PdfaFlavour.{self.name}: {self.flavour_id}>"

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    @classmethod
    def from_parts(cls, standard: IsoStandard, level: Level) -> "PdfaFlavour":
        """Return the enumerated flavour composed of ``standard`` and ``level``."""
        for flavour in cls:
            if flavour.standard is standard and flavour.level is level:
                return flavour
        logger.debug("No flavour for %s / %s", standard, level)
        raise UnknownFlavourError("flavour", (standard, level))

    @classmethod
    def by_flavour_id(cls, flavour_id: str) -> "PdfaFlavour":
        """
        Lookup by short flavour id.

        Ids are the part number followed by the level code (``"1b"``,
        ``"3u"``), or ``"none"``. Case and surrounding whitespace are
        ignored.
        """
        normalized = flavour_id.strip().lower() if isinstance(flavour_id, str) else None
        for flavour in cls:
            if flavour.flavour_id == normalized:
                return flavour
        logger.debug("No flavour with id %r", flavour_id)
        raise UnknownFlavourError("flavour", flavour_id)

    @classmethod
    def from_pdfaid(cls, part: int | str, conformance: str) -> "PdfaFlavour":
        """
        Resolve the claim made by the XMP ``pdfaid:part`` and
        ``pdfaid:conformance`` properties.

        A claim can never resolve to ``NONE``.
        """
        claim = f"{part}{conformance}"
        try:
            flavour = cls.from_parts(
                IsoStandard.from_part_number(part),
                Level.from_code(conformance),
            )
        except UnknownFlavourError as exc:
            # the failing lookup has already logged the miss
            raise UnknownFlavourError("flavour", claim) from exc
        if flavour is cls.NONE:
            logger.debug("Rejected pdfaid claim %r: sentinel", claim)
            raise UnknownFlavourError("flavour", claim)
        return flavour

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_record(self) -> "FlavourRecord":
        from .records import FlavourRecord

        return FlavourRecord(
            flavourId=self.flavour_id,
            standard=self.standard.to_record(),
            level=self.level.to_record(),
            display=self.display,
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible dict with camelCase keys."""
        return self.to_record().model_dump(by_alias=True)
