import random

from django.core.management.base import BaseCommand
from django.db import transaction
from faker import Faker

from apps.admission.models import StudentAdmission

TELANGANA_DISTRICTS = [
    'Hyderabad', 'Warangal', 'Karimnagar', 'Nizamabad', 'Khammam',
    'Nalgonda', 'Adilabad', 'Mahabubnagar', 'Medak', 'Rangareddy',
]
CLASSES = ['VI', 'VII', 'VIII', 'IX', 'X', '10-A', 'IX/B', 'Inter 1st Year']


class Command(BaseCommand):
    help = 'Loads dummy student admissions for trying out the dashboard'

    def add_arguments(self, parser):
        parser.add_argument('--count', type=int, default=10, help='Number of admissions to create')

    @transaction.atomic
    def handle(self, *args, **options):
        count = options['count']
        fake = Faker('en_IN')

        self.stdout.write('Creating admission dummy data...')
        for _ in range(count):
            StudentAdmission.objects.create(
                district=random.choice(TELANGANA_DISTRICTS),
                school_name=f"{fake.last_name()} High School",
                student_name=fake.name().replace("'", ''),
                father_name=fake.name_male().replace("'", ''),
                date_of_birth=fake.date_of_birth(minimum_age=10, maximum_age=18),
                class_name=random.choice(CLASSES),
                aadhar_no=''.join(random.choices('0123456789', k=12)),
                phone_no=random.choice('6789') + ''.join(random.choices('0123456789', k=9)),
                address=fake.address().replace('\n', ', '),
                student_consent=True,
                principal_consent=True,
            )

        self.stdout.write(self.style.SUCCESS(f'Created {count} student admissions'))
