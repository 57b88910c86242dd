from django.core.validators import RegexValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.admission.constants import Patterns
from apps.core.models import RegisteredModel, ReviewStatus


class InstitutionType:
    SCHOOL = 'SCHOOL'
    COLLEGE = 'COLLEGE'
    OTHER = 'OTHER'

    CHOICES = (
        (SCHOOL, _('High School')),
        (COLLEGE, _('Junior/Degree College')),
        (OTHER, _('Other Organization')),
    )

    ALL = [SCHOOL, COLLEGE, OTHER]


class Institution(RegisteredModel):
    """
    School, college or organization registered to the HSGA network.

    Created PENDING; changed only by an admin status transition or trainer
    assignment. Never deleted.
    """
    insti_name = models.CharField(max_length=255, verbose_name=_("Institution Name"))
    insti_type = models.CharField(
        max_length=20,
        choices=InstitutionType.CHOICES,
        verbose_name=_("Institution Type")
    )
    head_name = models.CharField(max_length=200, verbose_name=_("Head of Institution"))
    phone_no = models.CharField(
        max_length=10,
        validators=[RegexValidator(regex=Patterns.PHONE)],
        verbose_name=_("Phone Number")
    )
    email = models.EmailField(verbose_name=_("Official Email"))
    district = models.CharField(max_length=100, db_index=True, verbose_name=_("District"))
    trainer = models.ForeignKey(
        'trainers.Trainer',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='institutions',
        verbose_name=_("Assigned Trainer")
    )

    class Meta:
        db_table = "institutions"
        verbose_name = _("Institution")
        verbose_name_plural = _("Institutions")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=['status', 'district']),
        ]

    def __str__(self):
        return f"{self.insti_name} ({self.unique_id})"

    @property
    def is_approved(self):
        return self.status == ReviewStatus.APPROVED
