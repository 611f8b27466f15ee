from typing import Tuple

from pydantic import BaseModel, ConfigDict

from app.models.audit import AuditResult
from app.models.fields import ExtractedFields, FrozenMeta


class Report(BaseModel):
    """Result of analysing one URL, handed to the renderer or serialized as JSON."""

    model_config = ConfigDict(frozen=True)

    source_url: str
    fields: ExtractedFields
    audits: Tuple[AuditResult, ...]
    extra_social_meta: FrozenMeta
