from django.test import SimpleTestCase

from hireboard.core.utils.common import DummyObject
from hireboard.recruitment.constants import INTERVIEW_DATE_NOT_SET, INTERVIEW_TIME_NOT_SET
from hireboard.recruitment.utils.template import (
    render_template_message, has_placeholder, build_context
)


def get_candidate(**kwargs):
    data = {
        'name': 'Sara Ahmadi',
        'position': 'Product Manager',
        'interview_date': '',
        'interview_time': '',
    }
    data.update(kwargs)
    return DummyObject(**data)


class TestTemplateEngine(SimpleTestCase):
    def test_candidate_fields_are_replaced(self):
        message = render_template_message(
            'Hi {{candidateName}}, about {{position}} on {{interviewDate}} {{interviewTime}}.',
            get_candidate(interview_date='1403/05/10', interview_time='10:30')
        )
        self.assertEqual(message, 'Hi Sara Ahmadi, about Product Manager on 1403/05/10 10:30.')

    def test_missing_interview_uses_not_set_text(self):
        message = render_template_message(
            '{{interviewDate}} {{interviewTime}}', get_candidate()
        )
        self.assertEqual(message, f'{INTERVIEW_DATE_NOT_SET} {INTERVIEW_TIME_NOT_SET}')

    def test_extra_values_override_candidate_fields(self):
        message = render_template_message(
            '{{candidateName}} at {{companyName}}',
            get_candidate(),
            {'candidateName': 'Ali', 'companyName': 'Acme'}
        )
        self.assertEqual(message, 'Ali at Acme')

    def test_unknown_and_empty_keys_are_left_untouched(self):
        message = render_template_message(
            '{{unknown}} {{companyName}} {{companyWebsite}} {{position}}',
            get_candidate(position=''),
            {'companyName': '', 'companyWebsite': None}
        )
        self.assertEqual(message, '{{unknown}} {{companyName}} {{companyWebsite}} {{position}}')

    def test_replacement_is_single_pass(self):
        message = render_template_message(
            'Dear {{candidateName}}',
            get_candidate(name='{{position}}')
        )
        self.assertEqual(message, 'Dear {{position}}')

    def test_tokens_with_spaces_are_not_placeholders(self):
        message = render_template_message('{{ candidateName }}', get_candidate())
        self.assertEqual(message, '{{ candidateName }}')

    def test_empty_content(self):
        self.assertEqual(render_template_message('', get_candidate()), '')
        self.assertEqual(render_template_message(None, get_candidate()), '')

    def test_has_placeholder(self):
        self.assertTrue(has_placeholder('See you {{interviewDate}}', 'interviewDate'))
        self.assertFalse(has_placeholder('See you soon', 'interviewDate'))
        self.assertFalse(has_placeholder(None, 'interviewDate'))

    def test_build_context(self):
        setting = DummyObject(company_profile={
            'name': 'Acme', 'address': 'Tehran', 'website': 'https://acme.example'
        })
        stage = DummyObject(title='First Interview')
        self.assertEqual(
            build_context(setting, stage=stage),
            {
                'companyName': 'Acme',
                'companyAddress': 'Tehran',
                'companyWebsite': 'https://acme.example',
                'stageName': 'First Interview',
            }
        )
        self.assertIsNone(build_context(setting)['stageName'])
