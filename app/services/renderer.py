"""Render the audit page (form, audit table, preview cards, meta-tag listing).

Everything here works from a :class:`Report`; document-derived text is
always escaped, attribute values included.
"""

import html as _html
from typing import Optional

from app.models.report import Report

BOOTSTRAP_CSS = "https://cdn.jsdelivr.net/npm/bootstrap@5.3.0/dist/css/bootstrap.min.css"
BOOTSTRAP_JS = "https://cdn.jsdelivr.net/npm/bootstrap@5.3.0/dist/js/bootstrap.bundle.min.js"


def _e(text: Optional[str]) -> str:
    return _html.escape(str(text) if text else "", quote=True)


def _first(*values: Optional[str]) -> str:
    """Return the first non-empty value (the last argument is the fallback label)."""
    for value in values:
        if value:
            return value
    return ""


def _form(url: Optional[str]) -> str:
    return f"""
      <div class="row mb-4">
        <div class="col">
          <h1 class="mb-4">SEO Audit &amp; Social Media Preview</h1>
          <form method="GET" action="/">
            <div class="input-group">
              <input type="text" name="url" class="form-control" placeholder="Enter URL" value="{_e(url)}" required>
              <button class="btn btn-primary" type="submit">Analyze</button>
            </div>
          </form>
        </div>
      </div>"""


def _error_alert(message: str) -> str:
    return f"""
      <div class="alert alert-danger" role="alert">
        Error fetching URL: {_e(message)}
      </div>"""


def _audit_table(report: Report) -> str:
    rows = ""
    for check in report.audits:
        rows += f"""
            <tr>
              <td>{_e(check.name)}</td>
              <td>{_e(check.status_text)}</td>
              <td>{_e(check.suggestion)}</td>
            </tr>"""
    return f"""
      <h2 class="mb-3">SEO Audit</h2>
      <div class="table-responsive mb-5">
        <table class="table table-bordered">
          <thead class="table-light">
            <tr>
              <th>SEO Element</th>
              <th>Status</th>
              <th>Suggestion</th>
            </tr>
          </thead>
          <tbody>{rows}
          </tbody>
        </table>
      </div>"""


def _website_preview(report: Report) -> str:
    fields = report.fields
    og = fields.open_graph
    title = _first(og.title, fields.title, "No Title Found")
    description = _first(og.description, fields.meta_description, "No Description Found")
    return f"""
      <h2 class="mb-3">Website Preview</h2>
      <div class="card mb-4">
        <img src="{_e(og.image)}" class="card-img-top" alt="OG Image">
        <div class="card-body">
          <h5 class="card-title">{_e(title)}</h5>
          <p class="card-text">{_e(description)}</p>
          <a href="{_e(og.url)}" class="btn btn-primary" target="_blank">{_e(og.url)}</a>
        </div>
      </div>"""


def _social_card(
    image: Optional[str], alt: str, title: str, description: str, label: str, badge_class: str
) -> str:
    return f"""
        <div class="col-md-4">
          <div class="card">
            <img src="{_e(image)}" class="card-img-top" alt="{_e(alt)}">
            <div class="card-body">
              <h5 class="card-title">{_e(title)}</h5>
              <p class="card-text">{_e(description)}</p>
              <span class="badge {badge_class}">{_e(label)}</span>
            </div>
          </div>
        </div>"""


def _social_previews(report: Report) -> str:
    og = report.fields.open_graph
    twitter = report.fields.twitter_card
    og_title = _first(og.title, "No Title")
    og_description = _first(og.description, "No Description")
    cards = (
        _social_card(og.image, "Facebook Preview", og_title, og_description, "Facebook", "bg-primary")
        + _social_card(
            twitter.image,
            "Twitter Preview",
            _first(twitter.title, og.title, "No Title"),
            _first(twitter.description, og.description, "No Description"),
            "Twitter",
            "bg-info text-dark",
        )
        + _social_card(og.image, "TikTok Preview", og_title, og_description, "TikTok", "bg-dark")
    )
    return f"""
      <h2 class="mb-3">Social Media Previews</h2>
      <div class="row mb-4">{cards}
      </div>"""


def _meta_listing(report: Report) -> str:
    rows = ""
    for key, value in report.extra_social_meta.items():
        rows += f"""
            <tr>
              <td>{_e(key)}</td>
              <td>{_e(value)}</td>
            </tr>"""
    return f"""
      <h2 class="mb-3">Additional OG/Twitter Meta Tags</h2>
      <div class="table-responsive mb-5">
        <table class="table table-striped">
          <thead class="table-light">
            <tr>
              <th>Tag</th>
              <th>Content</th>
            </tr>
          </thead>
          <tbody>{rows}
          </tbody>
        </table>
      </div>"""


def render_page(
    url: Optional[str] = None,
    report: Optional[Report] = None,
    error: Optional[str] = None,
) -> str:
    """Return the full HTML page.

    With neither *report* nor *error* only the URL form is shown.  An *error*
    replaces the report sections entirely.
    """
    content = _form(url)
    if error is not None:
        content += _error_alert(error)
    elif report is not None:
        content += (
            _audit_table(report)
            + _website_preview(report)
            + _social_previews(report)
            + _meta_listing(report)
        )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>SEO Audit &amp; Preview</title>
  <link href="{BOOTSTRAP_CSS}" rel="stylesheet">
</head>
<body>
  <div class="container my-5">{content}
  </div>
  <script src="{BOOTSTRAP_JS}"></script>
</body>
</html>
"""
