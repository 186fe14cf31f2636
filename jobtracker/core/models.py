"""SQLAlchemy models for job application tracking."""
from datetime import date, datetime
from typing import Any, Dict, Optional

from sqlalchemy import Date, DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from jobtracker.core.database import Base
from jobtracker.core.schemas import DEFAULT_STATUS


class JobApplication(Base):
    """Model for a tracked job application."""
    __tablename__ = 'jobs'

    id: Mapped[int] = mapped_column(primary_key=True)
    company: Mapped[str] = mapped_column(String, index=True)
    title: Mapped[str] = mapped_column(String)
    # Stored as plain text: values outside JobStatus are kept, not rejected
    status: Mapped[str] = mapped_column(String, default=DEFAULT_STATUS.value, index=True)
    date_applied: Mapped[date] = mapped_column(Date, default=date.today, index=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, default='')
    created_at: Mapped[Optional[datetime]] = mapped_column(DateTime, server_default=func.now())

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'company': self.company,
            'title': self.title,
            'status': self.status,
            'date_applied': self.date_applied.isoformat() if self.date_applied else None,
            'notes': self.notes,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<JobApplication(id={self.id}, company='{self.company}', title='{self.title}', status='{self.status}')>"
