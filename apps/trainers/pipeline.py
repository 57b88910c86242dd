from apps.admission.constants import Patterns
from apps.core.pipeline import RegistrationPipeline

from .validators import validate_trainer


class TrainerRegistrationPipeline(RegistrationPipeline):
    """
    Trainer sign-up; the accepted result is the Unique Trainer ID.
    """
    validator = staticmethod(validate_trainer)
    endpoint = 'register_trainer'

    def set_field(self, name, value):
        # phone refuses non-digit keystrokes
        if name == 'phoneNo' and not Patterns.DIGITS.fullmatch(value or ''):
            return False
        super().set_field(name, value)
        return True
