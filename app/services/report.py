"""Report assembly: the single entry point from raw HTML to a :class:`Report`."""

import logging
from typing import Sequence

from app.models.audit import AuditResult, AuditStatus
from app.models.fields import ExtractedFields
from app.models.report import Report
from app.services.auditor import evaluate
from app.services.extractor import extract_fields, parse_document

logger = logging.getLogger(__name__)


def assemble_report(
    source_url: str, fields: ExtractedFields, audits: Sequence[AuditResult]
) -> Report:
    return Report(
        source_url=source_url,
        fields=fields,
        audits=tuple(audits),
        extra_social_meta=fields.extra_social_meta,
    )


def analyze_html(html: str, source_url: str) -> Report:
    """Parse *html*, extract its metadata, audit it and assemble the report."""
    soup = parse_document(html)
    fields = extract_fields(soup, source_url)
    audits = evaluate(fields)
    failing = [
        a.name for a in audits if a.status in (AuditStatus.MISSING, AuditStatus.INCOMPLETE)
    ]
    logger.info("Audit complete", extra={"url": source_url, "failing": failing})
    return assemble_report(source_url, fields, audits)
