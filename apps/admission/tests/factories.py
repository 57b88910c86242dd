import base64
import io

from PIL import Image

from apps.admission.submission import AdmissionSubmission


def png_bytes(size=(4, 4), color='red'):
    buffer = io.BytesIO()
    Image.new('RGB', size, color).save(buffer, format='PNG')
    return buffer.getvalue()


def png_data_url():
    return 'data:image/png;base64,' + base64.b64encode(png_bytes()).decode('ascii')


def valid_submission(**overrides):
    values = dict(
        district='Hyderabad',
        school_name='St. Marys High School',
        student_name='Ravi Kumar',
        father_name='Suresh Kumar',
        date_of_birth='2012-05-14',
        class_name='IX-B',
        aadhar_no='123412341234',
        address='12-3 Main Road, Secunderabad',
        phone_no='9876543210',
        student_consent=True,
        principal_consent=True,
    )
    values.update(overrides)
    return AdmissionSubmission(**values)


def valid_payload(**overrides):
    payload = valid_submission().to_payload()
    payload.update(
        studentSignature=png_data_url(),
        principalSignature=png_data_url(),
        seal=png_data_url(),
    )
    payload.update(overrides)
    return payload
