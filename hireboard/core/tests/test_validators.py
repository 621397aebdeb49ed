from django.core.exceptions import ValidationError
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import SimpleTestCase, override_settings

from hireboard.core.validators import (
    validate_title, validate_interview_date, validate_interview_time,
    validate_result_url, validate_phone_number, validate_file_size
)


class TestValidators(SimpleTestCase):
    def test_title(self):
        self.assertEqual(validate_title('Review'), 'Review')
        for value in ('', '   '):
            with self.subTest(value=value), self.assertRaises(ValidationError):
                validate_title(value)

    @override_settings(INTERVIEW_DATE_CALENDAR='jalali')
    def test_interview_date_jalali(self):
        self.assertEqual(validate_interview_date('1403/05/10'), '1403/05/10')
        for value in ('1403/07/31', '1403/13/01', '1403-05-10'):
            with self.subTest(value=value), self.assertRaises(ValidationError):
                validate_interview_date(value)

    @override_settings(INTERVIEW_DATE_CALENDAR='gregorian')
    def test_interview_date_gregorian(self):
        self.assertEqual(validate_interview_date('2024/02/29'), '2024/02/29')
        with self.assertRaises(ValidationError):
            validate_interview_date('2023/02/29')

    def test_interview_time(self):
        for value in ('00:00', '09:30', '23:59'):
            with self.subTest(value=value):
                self.assertEqual(validate_interview_time(value), value)
        for value in ('24:00', '9:30', '10:60', '10.30'):
            with self.subTest(value=value), self.assertRaises(ValidationError):
                validate_interview_time(value)

    def test_result_url(self):
        self.assertEqual(
            validate_result_url('https://example.com/r/1'), 'https://example.com/r/1'
        )
        with self.assertRaises(ValidationError):
            validate_result_url('ftp://example.com')

    def test_phone_number(self):
        self.assertEqual(validate_phone_number('+98 (912) 123-4567'), '+98 (912) 123-4567')
        with self.assertRaises(ValidationError):
            validate_phone_number('call me')

    @override_settings(MAX_FILE_SIZE=1)
    def test_file_size(self):
        small = SimpleUploadedFile('resume.pdf', b'x' * 1024)
        self.assertEqual(validate_file_size(small), small)
        with self.assertRaises(ValidationError):
            validate_file_size(SimpleUploadedFile('resume.pdf', b'x' * (1024 * 1024 + 1)))
