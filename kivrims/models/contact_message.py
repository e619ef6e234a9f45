import uuid
from datetime import datetime, timezone

from kivrims.extensions import db


def _utcnow():
    return datetime.now(timezone.utc)


class ContactMessage(db.Model):
    __tablename__ = 'contact_messages'

    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)

    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    subject = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text, nullable=False)

    # Timestamp
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow, index=True)

    def __repr__(self):
        return f'<ContactMessage {self.id} - {self.subject}>'
