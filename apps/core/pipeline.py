# apps/core/pipeline.py
"""
Submit flow shared by the public forms.

    EDITING -> VALIDATING -> SUBMITTING -> ACCEPTED
                          |             -> REJECTED
                          -> VALIDATION_FAILED

A submit validates locally, then makes exactly one request. Nothing is
retried: after VALIDATION_FAILED or REJECTED the fields are kept and the user
submits again. A submit while another one is running is refused.
"""
import enum
import logging
import threading

from apps.core.exceptions import TransportError, WorkflowError

logger = logging.getLogger(__name__)


class PipelineState(str, enum.Enum):
    EDITING = 'EDITING'
    VALIDATING = 'VALIDATING'
    VALIDATION_FAILED = 'VALIDATION_FAILED'
    SUBMITTING = 'SUBMITTING'
    ACCEPTED = 'ACCEPTED'
    REJECTED = 'REJECTED'


class SubmissionInFlight(WorkflowError):
    default_message = 'A submission is already in progress.'


class AlreadyAccepted(WorkflowError):
    default_message = 'This form has already been submitted.'


class SubmissionPipeline:
    """
    Subclasses provide ``candidate``, ``validate``, ``transmit`` and
    optionally ``accept``.
    """

    def __init__(self, client):
        self.client = client
        self.state = PipelineState.EDITING
        self.error = None
        self.result = None
        self.scroll_to_top = False
        self._lock = threading.Lock()

    # ---------- hooks ----------

    @property
    def candidate(self):
        raise NotImplementedError

    def validate(self, candidate):
        raise NotImplementedError

    def transmit(self, candidate):
        raise NotImplementedError

    def accept(self, response):
        return response

    # ---------- state ----------

    @property
    def busy(self):
        return self.state in (PipelineState.VALIDATING, PipelineState.SUBMITTING)

    @property
    def editable(self):
        return not self.busy and self.state != PipelineState.ACCEPTED

    def begin_edit(self):
        """
        Called before a field changes. Leaves a failed state for EDITING.
        """
        if self.state == PipelineState.ACCEPTED:
            raise AlreadyAccepted()
        if self.busy:
            raise SubmissionInFlight()
        if self.state in (PipelineState.VALIDATION_FAILED, PipelineState.REJECTED):
            self.state = PipelineState.EDITING

    def submit(self):
        if not self._lock.acquire(blocking=False):
            raise SubmissionInFlight()
        try:
            if self.state == PipelineState.ACCEPTED:
                raise AlreadyAccepted()
            return self._run()
        finally:
            self._lock.release()

    def _run(self):
        self.state = PipelineState.VALIDATING
        self.error = None
        self.result = None
        self.scroll_to_top = False

        candidate = self.candidate
        failure = self.validate(candidate)
        if failure is not None:
            self.state = PipelineState.VALIDATION_FAILED
            self.error = failure.message
            self.scroll_to_top = True
            logger.info("%s validation failed on %s", self.__class__.__name__, failure.field)
            return self.state

        self.state = PipelineState.SUBMITTING
        try:
            response = self.transmit(candidate)
            result = self.accept(response)
        except TransportError as exc:
            return self._reject(exc.message)
        except Exception:
            logger.error("%s submit failed", self.__class__.__name__, exc_info=True)
            return self._reject(TransportError.default_message)

        self.result = result
        self.state = PipelineState.ACCEPTED
        self.scroll_to_top = True
        return self.state

    def _reject(self, message):
        self.state = PipelineState.REJECTED
        self.error = message
        logger.warning("%s rejected: %s", self.__class__.__name__, message)
        return self.state


class RegistrationPipeline(SubmissionPipeline):
    """
    Registration forms answer with ``{"uniqueId": ...}``; the accepted
    result is that id.
    """
    validator = None
    endpoint = None

    def __init__(self, client, **values):
        super().__init__(client)
        self.values = dict(values)

    @property
    def candidate(self):
        return dict(self.values)

    def set_field(self, name, value):
        self.begin_edit()
        self.values[name] = value

    def validate(self, candidate):
        return self.validator(candidate)

    def payload(self, candidate):
        return candidate

    def transmit(self, candidate):
        return getattr(self.client, self.endpoint)(self.payload(candidate))

    def accept(self, response):
        return (response or {}).get('uniqueId')
