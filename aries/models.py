"""Models for the Aries lookup API contract."""

from enum import StrEnum

from pydantic import BaseModel


class ServiceProtocol(StrEnum):
    INDEX_LOOKUP = "index-lookup"
    IIIF_PRESENTATION = "iiif-presentation"


class ServiceURL(BaseModel):
    """A service endpoint and the protocol it speaks."""

    url: str
    protocol: ServiceProtocol


class AriesResult(BaseModel):
    """Where an object's identifiers, services, access pages and metadata live.

    Empty lists are left out of the serialized response.
    """

    identifier: list[str] = []
    service_url: list[ServiceURL] = []
    access_url: list[str] = []
    metadata_url: list[str] = []
