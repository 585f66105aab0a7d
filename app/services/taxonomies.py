"""The three configurable taxonomies exposed by the admin API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Tuple, Type

from app.schemas.resources import BrandProfile, DemographicProfile, LegalGuideline, ResourceRecord
from app.services.sample_data import SAMPLE_BRANDS, SAMPLE_DEMOGRAPHICS, SAMPLE_LEGAL_GUIDELINES

TaxonomyKey = Literal["brands", "demographics", "legal"]


@dataclass(frozen=True)
class Taxonomy:
    key: TaxonomyKey
    label: str  # "Brand"
    plural: str  # "brands"
    model: Type[ResourceRecord]
    fallback: Tuple[Dict[str, Any], ...]
    enrich_on_create: bool = False


BRANDS = Taxonomy(
    key="brands",
    label="Brand",
    plural="brands",
    model=BrandProfile,
    fallback=SAMPLE_BRANDS,
)

DEMOGRAPHICS = Taxonomy(
    key="demographics",
    label="Demographic",
    plural="demographics",
    model=DemographicProfile,
    fallback=SAMPLE_DEMOGRAPHICS,
    enrich_on_create=True,
)

LEGAL = Taxonomy(
    key="legal",
    label="Legal guideline",
    plural="legal guidelines",
    model=LegalGuideline,
    fallback=SAMPLE_LEGAL_GUIDELINES,
)

TAXONOMIES: Dict[str, Taxonomy] = {t.key: t for t in (BRANDS, DEMOGRAPHICS, LEGAL)}
