"""Trip document models."""

from datetime import datetime

from pydantic import Field

from tripsync.models.common import DocumentType, TripSyncModel, new_id


class TripDocument(TripSyncModel):
    """A ticket, booking or scan attached to a trip.

    The POI and region associations hold ids only; the referenced entity can
    be removed independently and the association then no longer resolves.
    """

    id: str = Field(default_factory=new_id)
    title: str
    type: DocumentType
    file_path: str | None = None
    cloud_url: str | None = None
    thumbnail_path: str | None = None
    upload_date: datetime = Field(default_factory=datetime.now)
    associated_poi_id: str | None = None
    associated_region_id: str | None = None
    tags: list[str] = Field(default_factory=list)
    notes: str = ""

    @property
    def is_uploaded(self) -> bool:
        return self.file_path is not None or self.cloud_url is not None
