"""Pydantic models for the Solr JSON response format."""

from pydantic import BaseModel, ConfigDict, Field


class SolrHeader(BaseModel):
    """The standard header of a Solr response."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    status: int = 0
    q_time: int = Field(default=0, alias="QTime")


class SolrDocument(BaseModel):
    """A single document returned by an identifier lookup."""

    model_config = ConfigDict(extra="ignore")

    id: str
    shadowed_location_facet: list[str] = []
    marc_display: str = ""
    alternate_id_facet: list[str] = []
    barcode_facet: list[str] = []
    feature_facet: list[str] = []


class SolrResponse(BaseModel):
    """Hit details of a Solr query."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    num_found: int = Field(alias="numFound")
    start: int = 0
    docs: list[SolrDocument] = []


class SolrFullResponse(BaseModel):
    """Complete Solr response: a header and the response data."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    response_header: SolrHeader = Field(alias="responseHeader")
    response: SolrResponse
