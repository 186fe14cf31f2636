"""Add/edit form state for a job application."""
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

from jobtracker.core.schemas import DEFAULT_STATUS

SERVER_DEFAULTED_FIELDS = ('status', 'date_applied')


class JobFormError(Exception):
    """The form cannot be submitted; the message is shown above the form."""


@dataclass
class JobForm:
    company: str = ''
    title: str = ''
    status: str = DEFAULT_STATUS.value
    date_applied: str = ''
    notes: str = ''

    @classmethod
    def from_job(cls, job: Mapping[str, Any]) -> 'JobForm':
        """Pre-fill the form from an existing job for editing."""
        return cls(
            company=job.get('company') or '',
            title=job.get('title') or '',
            status=job.get('status') or DEFAULT_STATUS.value,
            date_applied=job.get('date_applied') or '',
            notes=job.get('notes') or ''
        )

    def validate(self) -> None:
        if not self.company.strip() or not self.title.strip():
            raise JobFormError('Company and job title are required')

    def to_payload(self) -> Dict[str, Any]:
        """Request body; blank status and date are left for the server to default."""
        payload = asdict(self)
        for field in SERVER_DEFAULTED_FIELDS:
            if not payload[field]:
                del payload[field]
        return payload

    def submit(self, target, job_id: Optional[int] = None) -> Dict[str, Any]:
        """Create the job, or update ``job_id`` when editing.

        ``target`` is anything with ``create_job``/``update_job``, i.e. a
        :class:`~jobtracker.client.api.JobsApiClient` or a
        :class:`~jobtracker.client.board.JobBoard` (which also refreshes).
        """
        self.validate()
        if job_id is None:
            return target.create_job(self.to_payload())
        return target.update_job(job_id, self.to_payload())
