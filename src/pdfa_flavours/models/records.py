"""
Flavour Records – Serialization Model
======================================
Pydantic models for the machine-readable form of the taxonomy, as embedded
by report generators and persistence layers.

Records are plain data: they are produced from enumerated members with
``to_record()`` and turned back into the *same* members with ``resolve()``.
Only the identifying keys (``partNumber``, ``year``, ``code``) take part in
resolution; the derived fields are informative and may be omitted.

Example::

    from pdfa_flavours import PdfaFlavour, flavour_from_json

    text = PdfaFlavour.PDFA_2_B.to_record().model_dump_json(by_alias=True)
    assert flavour_from_json(text) is PdfaFlavour.PDFA_2_B
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import UnknownFlavourError
from .flavour import IsoStandard, IsoStandardSeries, Level, PdfaFlavour

logger = logging.getLogger(__name__)


class SeriesRecord(BaseModel):
    """Serialized :class:`IsoStandardSeries`."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., description="Numeric ISO series id, 0 for none")
    name: str | None = Field(None, description="Canonical name, e.g. 'ISO 19005'")
    description: str | None = Field(None)

    def resolve(self) -> IsoStandardSeries:
        return IsoStandardSeries.from_id(self.id)


class StandardRecord(BaseModel):
    """Serialized :class:`IsoStandard`."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    part_number: int = Field(..., alias="partNumber", description="ISO 19005 part")
    year: str = Field(..., description="Publication year of the part")
    id: str | None = Field(None, description="ISO reference, e.g. 'ISO 19005-1:2005'")
    name: str | None = Field(None, description="Short name, e.g. 'PDF/A-1'")
    description: str | None = Field(None)
    series: SeriesRecord | None = Field(None)

    def resolve(self) -> IsoStandard:
        """Return the enumerated standard with this part number and year."""
        standard = IsoStandard.from_part_number(self.part_number)
        if standard.year != self.year:
            logger.debug(
                "Year %r does not match %s (%s)", self.year, standard.id, standard.year
            )
            raise UnknownFlavourError("standard", f"{self.part_number}:{self.year}")
        return standard


class LevelRecord(BaseModel):
    """Serialized :class:`Level`."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str = Field(..., description="a | b | u | none")
    full_name: str | None = Field(None, alias="fullName")

    def resolve(self) -> Level:
        return Level.from_code(self.code)


class FlavourRecord(BaseModel):
    """Serialized :class:`PdfaFlavour`."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    standard: StandardRecord
    level: LevelRecord
    flavour_id: str | None = Field(None, alias="flavourId", description="e.g. '1b'")
    display: str | None = Field(None, description="Human-readable flavour string")

    def resolve(self) -> PdfaFlavour:
        """Return the enumerated flavour this record describes."""
        return PdfaFlavour.from_parts(self.standard.resolve(), self.level.resolve())


def flavour_from_json(text: str | bytes) -> PdfaFlavour:
    """
    Parse a serialized flavour and return the enumerated member.

    Raises ``pydantic.ValidationError`` for malformed input and
    :class:`~pdfa_flavours.exceptions.UnknownFlavourError` when the record
    names a flavour outside the taxonomy.
    """
    return FlavourRecord.model_validate_json(text).resolve()
