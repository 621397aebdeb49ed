from io import StringIO

from django.core.management import call_command
from django.urls import reverse

from hireboard.common.api.tests.common import HireBoardAPITestCase
from hireboard.recruitment.constants import DEFAULT_SOURCES, DEFAULT_TEMPLATES
from hireboard.recruitment.models import RecruitmentSetting, Template


class TestRecruitmentSettingAPI(HireBoardAPITestCase):
    users = (
        ('admin', 'Str0ng#Pass', True),
        ('sara', 'Str0ng#Pass', False),
    )

    @property
    def url(self):
        return reverse('api_v1:recruitment:settings')

    @property
    def payload(self):
        return {
            'sources': ['LinkedIn', ' Referral '],
            'company_profile': {
                'name': 'Acme',
                'website': 'https://acme.example.com',
                'address': 'Tehran',
                'job_positions': [
                    {'id': 'job-1', 'title': 'Backend Developer'},
                    {'title': 'QA Engineer'},
                ]
            },
            'test_library': [
                {'id': 'test-1', 'name': 'Archetype Test', 'url': 'https://example.com/archetype/'},
                {'name': 'Logic Test', 'url': 'https://example.com/logic/'},
            ]
        }

    def test_retrieve_defaults(self):
        self.client.force_login(self.created_users[1])
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, self.status.HTTP_200_OK)
        self.assertEqual(response.data['sources'], DEFAULT_SOURCES)
        self.assertEqual(response.data['company_profile']['name'], 'Your Company')
        self.assertEqual(len(response.data['test_library']), 6)

    def test_update_settings(self):
        self.client.force_login(self.admin)
        response = self.client.put(self.url, self.payload, format='json')
        self.assertEqual(response.status_code, self.status.HTTP_200_OK, response.data)

        setting = RecruitmentSetting.get_solo()
        self.assertEqual(setting.sources, ['LinkedIn', 'Referral'])
        self.assertEqual(setting.company_name, 'Acme')
        self.assertEqual(setting.job_positions[0], {'id': 'job-1', 'title': 'Backend Developer'})
        self.assertTrue(setting.job_positions[1]['id'].startswith('job-'))
        self.assertTrue(setting.test_library[1]['id'].startswith('test-'))
        self.assertEqual(RecruitmentSetting.objects.count(), 1)

    def test_update_settings_validation(self):
        self.client.force_login(self.admin)
        duplicate_source = self.payload
        duplicate_source['sources'] = ['LinkedIn', 'linkedin']

        duplicate_position = self.payload
        duplicate_position['company_profile']['job_positions'].append(
            {'title': 'qa engineer'}
        )

        duplicate_test_id = self.payload
        duplicate_test_id['test_library'][1]['id'] = 'test-1'

        invalid_url = self.payload
        invalid_url['test_library'][1]['url'] = 'not a link'

        for field, payload in (
            ('sources', duplicate_source),
            ('company_profile', duplicate_position),
            ('test_library', duplicate_test_id),
            ('test_library', invalid_url),
        ):
            with self.atomicSubTest(field=field):
                response = self.client.put(self.url, payload, format='json')
                self.assertEqual(response.status_code, self.status.HTTP_400_BAD_REQUEST)
                self.assertIn(field, response.data)

    def test_normal_user_can_not_update(self):
        self.client.force_login(self.created_users[1])
        response = self.client.put(self.url, self.payload, format='json')
        self.assertEqual(response.status_code, self.status.HTTP_403_FORBIDDEN)

        response = self.client.post(
            reverse('api_v1:recruitment:settings-sources'), {'name': 'Twitter'}, format='json'
        )
        self.assertEqual(response.status_code, self.status.HTTP_403_FORBIDDEN)

    def test_add_items(self):
        self.client.force_login(self.admin)
        response = self.client.post(
            reverse('api_v1:recruitment:settings-sources'), {'name': ' Twitter '}, format='json'
        )
        self.assertEqual(response.status_code, self.status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data, 'Twitter')

        response = self.client.post(
            reverse('api_v1:recruitment:settings-sources'),
            {'name': 'Telegram', 'title': 'Messenger'},
            format='json'
        )
        self.assertEqual(response.status_code, self.status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data, 'Telegram')

        response = self.client.post(
            reverse('api_v1:recruitment:settings-job-positions'),
            {'title': 'Data Analyst'},
            format='json'
        )
        self.assertEqual(response.status_code, self.status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data['title'], 'Data Analyst')

        response = self.client.post(
            reverse('api_v1:recruitment:settings-tests'),
            {'name': 'Logic Test', 'url': 'https://example.com/logic/'},
            format='json'
        )
        self.assertEqual(response.status_code, self.status.HTTP_201_CREATED, response.data)

        setting = RecruitmentSetting.get_solo()
        self.assertEqual(setting.sources[-2:], ['Twitter', 'Telegram'])
        self.assertEqual(setting.job_positions[-1]['title'], 'Data Analyst')
        self.assertEqual(setting.get_test(response.data['id'])['name'], 'Logic Test')

    def test_add_duplicate_items(self):
        self.client.force_login(self.admin)
        for url_name, payload, field in (
            ('settings-sources', {'name': 'linkedin'}, 'name'),
            ('settings-sources', {}, 'name'),
            ('settings-job-positions', {'title': 'PRODUCT MANAGER'}, 'title'),
            ('settings-tests', {'name': 'MBTI Test', 'url': 'https://example.com/'}, 'name'),
            ('settings-tests', {'name': 'Logic Test'}, 'url'),
        ):
            with self.atomicSubTest(url_name=url_name, payload=payload):
                response = self.client.post(
                    reverse(f'api_v1:recruitment:{url_name}'), payload, format='json'
                )
                self.assertEqual(response.status_code, self.status.HTTP_400_BAD_REQUEST)
                self.assertIn(field, response.data)


class TestSeedRecruitmentDefaults(HireBoardAPITestCase):
    users = (
        ('admin', 'Str0ng#Pass', True),
    )

    def test_seed_is_repeatable(self):
        out = StringIO()
        call_command('seed_recruitment_defaults', stdout=out)
        self.assertEqual(Template.objects.count(), len(DEFAULT_TEMPLATES))
        self.assertTrue(
            Template.objects.filter(name='First interview invitation', stage_id='interview-1').exists()
        )

        call_command('seed_recruitment_defaults', stdout=out)
        self.assertEqual(Template.objects.count(), len(DEFAULT_TEMPLATES))
        self.assertIn('already exists and was ignored', out.getvalue())
