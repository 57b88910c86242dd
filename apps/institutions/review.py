# apps/institutions/review.py
"""
Admin review board driven through the portal API.

After every successful write the whole list is read again from the server;
rows are never patched locally, so ``institutions`` always holds the last
authoritative read.
"""
import logging
import threading
from contextlib import contextmanager

from apps.core.exceptions import TransportError, WorkflowError
from apps.core.models import ReviewStatus

from .workflow import Messages

logger = logging.getLogger(__name__)


class ActionInFlight(WorkflowError):
    default_message = 'An update for this institution is already in progress.'


class ReviewBoard:
    def __init__(self, client):
        self.client = client
        self.institutions = []
        self.trainers = []
        self.error = None
        self._pending = set()
        self._lock = threading.Lock()

    def refresh(self):
        """
        Load institutions and approved trainers.

        A failed read keeps the previous rows and records the error.
        """
        try:
            institutions = self.client.list_institutions() or []
            trainers = self.client.list_approved_trainers() or []
        except TransportError as exc:
            self.error = exc.message
            logger.warning("Review board refresh failed: %s", exc.message)
            raise
        self.institutions = institutions
        self.trainers = trainers
        self.error = None
        return self.institutions

    def get(self, institution_id):
        key = str(institution_id)
        for row in self.institutions:
            if str(row.get('id')) == key:
                return row
        return None

    def pending(self, institution_id=None):
        if institution_id is None:
            return bool(self._pending)
        return str(institution_id) in self._pending

    def set_status(self, institution_id, status):
        if status not in ReviewStatus.ALL:
            raise WorkflowError('Invalid status')
        with self._action(institution_id):
            self.client.set_institution_status(institution_id, status)
        return self.refresh()

    def assign_trainer(self, institution_id, trainer_id):
        """
        Assign a trainer by unique id; an empty id unassigns.

        Refused locally unless the last read shows the institution APPROVED.
        """
        row = self.get(institution_id)
        if row is None or row.get('status') != ReviewStatus.APPROVED:
            raise WorkflowError(str(Messages.NOT_APPROVED))
        with self._action(institution_id):
            self.client.assign_trainer(institution_id, trainer_id or None)
        return self.refresh()

    @contextmanager
    def _action(self, institution_id):
        key = str(institution_id)
        with self._lock:
            if key in self._pending:
                raise ActionInFlight()
            self._pending.add(key)
        try:
            yield
        except TransportError as exc:
            self.error = exc.message
            raise
        finally:
            with self._lock:
                self._pending.discard(key)
