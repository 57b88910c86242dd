"""
Admin review of institution registrations.

Each call is one write; concurrent admins are not coordinated and the last
write wins.
"""
import logging

from django.utils.translation import gettext_lazy as _

from apps.core.exceptions import WorkflowError

logger = logging.getLogger(__name__)


class Messages:
    NOT_APPROVED = _("Approve the institution before assigning a trainer.")
    TRAINER_NOT_APPROVED = _("Only approved trainers can be assigned.")


def set_status(institution, status, actor=None):
    """
    PENDING -> APPROVED / DECLINED, or reset any decision to PENDING
    """
    previous = institution.set_status(status)
    logger.info(
        "Institution %s status %s -> %s by %s",
        institution.unique_id, previous, status, actor or 'system',
    )
    return institution


def assign_trainer(institution, trainer, actor=None):
    """
    Assign (or with ``trainer=None`` unassign) the trainer of an APPROVED
    institution.
    """
    if not institution.is_approved:
        logger.warning(
            "Refused trainer assignment on %s: status is %s",
            institution.unique_id, institution.status,
        )
        raise WorkflowError(str(Messages.NOT_APPROVED))
    if trainer is not None and not trainer.is_approved:
        raise WorkflowError(str(Messages.TRAINER_NOT_APPROVED))

    institution.trainer = trainer
    institution.save(update_fields=['trainer', 'updated_at'])
    logger.info(
        "Institution %s assigned to trainer %s by %s",
        institution.unique_id, trainer.unique_id if trainer else None, actor or 'system',
    )
    return institution
