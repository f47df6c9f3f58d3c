from __future__ import annotations

from pydantic import BaseModel, Field


class LanguageSummary(BaseModel):
    code: str
    name: str
    native_name: str
    flag: str | None
    lemma_count: int
    has_inflections: bool


class LanguageListResponse(BaseModel):
    items: list[LanguageSummary]


class FilterOptionModel(BaseModel):
    id: str
    name: str
    icon: str | None = None
    color: str | None = None


class GlobalFiltersResponse(BaseModel):
    levels: list[str]
    categories: list[str]
    level_options: list[FilterOptionModel]
    category_options: list[FilterOptionModel]


class FacetSummaryResponse(BaseModel):
    source_lang: str
    target_lang: str
    total_concepts: int
    total_with_translations: int
    levels: list[str]
    categories: list[str]
    level_options: list[FilterOptionModel] = Field(default_factory=list)
    category_options: list[FilterOptionModel] = Field(default_factory=list)


class ConceptMetadataModel(BaseModel):
    level: str
    category: str
    type: str
    source_definition: str | None = None
    source_sentence: str | None = None
    target_definition: str | None = None
    target_sentence: str | None = None


class ConceptModel(BaseModel):
    id: int | str
    key: str
    source_text: str
    target_text: str
    metadata: ConceptMetadataModel


class ConceptListResponse(BaseModel):
    source_lang: str
    target_lang: str
    level: str
    category: str
    count: int
    items: list[ConceptModel]
