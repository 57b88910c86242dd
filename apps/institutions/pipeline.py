from apps.admission.constants import Patterns
from apps.core.pipeline import RegistrationPipeline

from .validators import validate_institution


class InstitutionRegistrationPipeline(RegistrationPipeline):
    validator = staticmethod(validate_institution)
    endpoint = 'register_institution'

    def set_field(self, name, value):
        if name == 'phoneNo' and not Patterns.DIGITS.fullmatch(value or ''):
            return False
        super().set_field(name, value)
        return True
