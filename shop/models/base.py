"""Audit columns shared by every entity."""

from datetime import datetime
from flask import has_request_context
from flask_login import current_user
from shop.extensions import db


def current_auditor():
    """Email of the logged-in member, or None outside an authenticated request."""
    if has_request_context() and current_user.is_authenticated:
        return current_user.email
    return None


class TimestampMixin:
    """Registration and last-update times."""
    reg_time = db.Column(db.DateTime, default=datetime.utcnow)
    update_time = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class AuditMixin(TimestampMixin):
    """Timestamps plus the member who created and last modified the row."""
    created_by = db.Column(db.String(120), default=current_auditor)
    modified_by = db.Column(db.String(120), default=current_auditor, onupdate=current_auditor)
