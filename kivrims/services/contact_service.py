from typing import Dict, Any

from kivrims.extensions import db
from kivrims.models import ContactMessage


class ContactService:
    """Contact form persistence"""

    @staticmethod
    def create_message(data: Dict[str, Any]) -> ContactMessage:
        """
        Store a contact form submission

        Args:
            data: Validated name, email, subject and message

        Returns:
            The stored ContactMessage (id and created_at populated)
        """
        contact_message = ContactMessage(
            name=data['name'],
            email=data['email'],
            subject=data['subject'],
            message=data['message']
        )

        try:
            db.session.add(contact_message)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        return contact_message
