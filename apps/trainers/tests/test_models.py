import re
from unittest import mock

from django.db import IntegrityError
from django.test import TestCase, override_settings

from apps.core.exceptions import WorkflowError
from apps.core.models import ReviewStatus
from apps.trainers.models import Trainer


def make_trainer(**overrides):
    values = dict(
        full_name='Srinivas Rao',
        phone_no='9123456780',
        email='srinivas@example.com',
        district='Nalgonda',
    )
    values.update(overrides)
    trainer = Trainer(**values)
    trainer.set_password('scout123')
    trainer.save()
    return trainer


class TrainerModelTests(TestCase):
    def test_unique_id_assigned_on_save(self):
        trainer = make_trainer()
        self.assertRegex(trainer.unique_id, r'^HSGA-TR-[A-HJ-NP-Z2-9]{6}$')
        self.assertEqual(trainer.status, ReviewStatus.PENDING)

    @override_settings(HSGA_UNIQUE_ID_PREFIXES={})
    def test_prefix_falls_back_to_class_name(self):
        self.assertTrue(make_trainer().unique_id.startswith('TRA-'))

    def test_password_is_hashed(self):
        trainer = make_trainer()
        self.assertNotEqual(trainer.password, 'scout123')
        self.assertTrue(trainer.check_password('scout123'))

    def test_unique_id_collision_is_retried(self):
        first = make_trainer()
        ids = iter([first.unique_id, 'HSGA-TR-FRESH2'])
        with mock.patch.object(Trainer, 'generate_unique_id', side_effect=lambda: next(ids)):
            second = make_trainer(email='other@example.com')
        self.assertEqual(second.unique_id, 'HSGA-TR-FRESH2')

    def test_gives_up_after_repeated_collisions(self):
        first = make_trainer()
        with mock.patch.object(Trainer, 'generate_unique_id', return_value=first.unique_id):
            with self.assertRaises(IntegrityError):
                make_trainer(email='other@example.com')

    def test_set_status(self):
        trainer = make_trainer()
        previous = trainer.set_status(ReviewStatus.APPROVED)

        self.assertEqual(previous, ReviewStatus.PENDING)
        trainer.refresh_from_db()
        self.assertTrue(trainer.is_approved)
        self.assertEqual(list(Trainer.objects.approved()), [trainer])

    def test_unknown_status_is_refused(self):
        with self.assertRaises(WorkflowError):
            make_trainer().set_status('MAYBE')
