from apps.core.pipeline import SubmissionPipeline

from .constants import Messages
from .submission import SubmissionBuilder
from .validators import validate


class AdmissionPipeline(SubmissionPipeline):
    """
    Student admission submit flow: the builder holds the form state, the
    pipeline validates it and sends it once per submit.
    """

    def __init__(self, client, builder=None):
        super().__init__(client)
        self.builder = builder or SubmissionBuilder()

    @property
    def candidate(self):
        return self.builder.build()

    def set_field(self, name, value):
        self.begin_edit()
        return self.builder.set_field(name, value)

    def set_consent(self, student=None, principal=None):
        self.begin_edit()
        self.builder.set_consent(student=student, principal=principal)

    def attach(self, field, data, content_type=None, filename=None):
        self.begin_edit()
        return self.builder.attach(field, data, content_type=content_type, filename=filename)

    def validate(self, candidate):
        return validate(candidate)

    def transmit(self, candidate):
        return self.client.submit_admission(candidate.to_payload())

    def accept(self, response):
        return str(Messages.SUCCESS)
