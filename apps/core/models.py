import uuid

from django.conf import settings
from django.db import IntegrityError, models, transaction
from django.utils.crypto import get_random_string
from django.utils.translation import gettext_lazy as _

from apps.core.exceptions import WorkflowError


class UUIDModel(models.Model):
    """
    UUID primary key so record ids cannot be enumerated from the public API
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        unique=True,
        verbose_name='Universal ID'
    )

    class Meta:
        abstract = True

    @property
    def short_id(self):
        """Short identifier for logging and display"""
        return str(self.id)[:8]


class TimeStampedModel(models.Model):
    """
    Creation / modification timestamps
    """
    created_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        verbose_name='Creation Timestamp'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Last Modification Timestamp'
    )

    class Meta:
        abstract = True
        ordering = ['-created_at']


class BaseModel(UUIDModel, TimeStampedModel):
    """
    Base model for every portal record
    """

    class Meta:
        abstract = True
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.__class__.__name__}[{self.short_id}]"


class ReviewStatus:
    """
    Review status shared by institutions and trainers
    """
    PENDING = 'PENDING'
    APPROVED = 'APPROVED'
    DECLINED = 'DECLINED'

    CHOICES = (
        (PENDING, _('Pending')),
        (APPROVED, _('Approved')),
        (DECLINED, _('Declined')),
    )

    ALL = [PENDING, APPROVED, DECLINED]


class RegisteredModel(BaseModel):
    """
    Public registration with a human readable unique id and a review status.

    The unique id is assigned on first save, from the prefix configured in
    ``HSGA_UNIQUE_ID_PREFIXES`` for the concrete model.
    """
    UNIQUE_ID_LENGTH = 6
    UNIQUE_ID_ATTEMPTS = 5

    unique_id = models.CharField(
        max_length=32,
        unique=True,
        editable=False,
        db_index=True,
        verbose_name=_("Unique ID")
    )
    status = models.CharField(
        max_length=20,
        choices=ReviewStatus.CHOICES,
        default=ReviewStatus.PENDING,
        db_index=True,
        verbose_name=_("Status")
    )
    password = models.CharField(max_length=128, verbose_name=_("Password"))

    class Meta:
        abstract = True
        ordering = ['-created_at']

    def __str__(self):
        return self.unique_id or super().__str__()

    @classmethod
    def unique_id_prefix(cls):
        prefixes = getattr(settings, 'HSGA_UNIQUE_ID_PREFIXES', {})
        return prefixes.get(cls.__name__, cls.__name__[:3].upper())

    @classmethod
    def generate_unique_id(cls):
        suffix = get_random_string(
            cls.UNIQUE_ID_LENGTH,
            allowed_chars='ABCDEFGHJKLMNPQRSTUVWXYZ23456789'
        )
        return f"{cls.unique_id_prefix()}-{suffix}"

    def set_status(self, status):
        """
        Move to any review status (PENDING resets a decision). Returns the
        previous status.
        """
        if status not in ReviewStatus.ALL:
            raise WorkflowError(f"Unknown status: {status}")
        previous = self.status
        self.status = status
        self.save(update_fields=['status', 'updated_at'])
        return previous

    def set_password(self, raw_password):
        from django.contrib.auth.hashers import make_password
        self.password = make_password(raw_password)

    def check_password(self, raw_password):
        from django.contrib.auth.hashers import check_password
        return check_password(raw_password, self.password)

    def save(self, *args, **kwargs):
        if self.unique_id:
            return super().save(*args, **kwargs)

        # Collisions are unlikely but possible, retry with a fresh id
        for attempt in range(self.UNIQUE_ID_ATTEMPTS):
            self.unique_id = self.generate_unique_id()
            try:
                with transaction.atomic():
                    return super().save(*args, **kwargs)
            except IntegrityError:
                if attempt == self.UNIQUE_ID_ATTEMPTS - 1:
                    raise
                self.unique_id = ''
