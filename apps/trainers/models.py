from django.core.validators import RegexValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.admission.constants import Patterns
from apps.core.models import RegisteredModel, ReviewStatus

from .validators import Messages


class TrainerQuerySet(models.QuerySet):
    def approved(self):
        return self.filter(status=ReviewStatus.APPROVED)


class Trainer(RegisteredModel):
    """
    Scout/guide trainer. Approved trainers can be assigned to institutions.
    """
    full_name = models.CharField(
        max_length=200,
        validators=[RegexValidator(regex=Patterns.TEXT, message=Messages.FULL_NAME)],
        verbose_name=_("Full Name")
    )
    phone_no = models.CharField(
        max_length=10,
        validators=[RegexValidator(regex=Patterns.PHONE, message=Messages.PHONE)],
        verbose_name=_("Phone Number")
    )
    email = models.EmailField(verbose_name=_("Email Address"))
    district = models.CharField(
        max_length=100,
        validators=[RegexValidator(regex=Patterns.TEXT, message=Messages.DISTRICT)],
        db_index=True,
        verbose_name=_("District")
    )

    objects = TrainerQuerySet.as_manager()

    class Meta:
        db_table = "trainers"
        verbose_name = _("Trainer")
        verbose_name_plural = _("Trainers")
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.full_name} ({self.unique_id})"

    @property
    def is_approved(self):
        return self.status == ReviewStatus.APPROVED
