from datetime import date

from django.test import SimpleTestCase, override_settings
from django.urls import reverse

from hireboard.common.api.tests.common import HireBoardAPITestCase
from hireboard.recruitment.api.v1.tests.factory import (
    CandidateFactory, TemplateFactory, CandidateTestResultFactory
)
from hireboard.recruitment.constants import (
    INBOX, REVIEW, HIRED, EMAIL, WHATSAPP, PENDING, NOT_SENT, PASSED
)
from hireboard.recruitment.models import Candidate, Stage
from hireboard.recruitment.utils.summary import get_week_range


class TestCandidateAPI(HireBoardAPITestCase):
    users = (
        ('admin', 'Str0ng#Pass', True),
        ('sara', 'Str0ng#Pass', False),
    )

    @property
    def normal(self):
        return self.created_users[1]

    def setUp(self):
        super().setUp()
        self.client.force_login(self.normal)

    @staticmethod
    def detail_url(candidate, action='detail'):
        return reverse(
            f'api_v1:recruitment:candidate-{action}', kwargs={'pk': candidate.id}
        )

    @property
    def payload(self):
        return {
            'name': 'Ali Rezaei',
            'email': 'Ali@Example.com',
            'phone': '0912 123 4567',
            'position': 'Product Manager',
            'source': 'LinkedIn',
            'rating': 4,
        }

    def test_create_candidate(self):
        response = self.client.post(
            reverse('api_v1:recruitment:candidate-list'), self.payload, format='json'
        )
        self.assertEqual(response.status_code, self.status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data['stage'], INBOX)
        self.assertEqual(response.data['email'], 'ali@example.com')

        candidate = Candidate.objects.get(id=response.data['id'])
        self.assertEqual(candidate.histories.get().action, 'candidate created')
        self.assertEqual(candidate.created_by, self.normal)

    def test_create_candidate_validation(self):
        CandidateFactory(email='ali@example.com')
        url = reverse('api_v1:recruitment:candidate-list')
        for field, value in (
            ('email', 'ALI@example.com'),
            ('name', '   '),
            ('rating', 6),
            ('phone', 'no phone'),
            ('interview_date', '1403/13/01'),
        ):
            with self.atomicSubTest(field=field):
                payload = {**self.payload, 'email': 'other@example.com', field: value}
                response = self.client.post(url, payload, format='json')
                self.assertEqual(response.status_code, self.status.HTTP_400_BAD_REQUEST)
                self.assertIn(field, response.data)

    def test_interview_date_and_time_go_together(self):
        payload = self.payload
        payload['interview_date'] = '1403/05/10'
        response = self.client.post(
            reverse('api_v1:recruitment:candidate-list'), payload, format='json'
        )
        self.assertEqual(response.status_code, self.status.HTTP_400_BAD_REQUEST)
        self.assertIn('interview_time', response.data)

    def test_update_candidate_keeps_stage(self):
        candidate = CandidateFactory()
        payload = self.payload
        payload['stage'] = HIRED
        response = self.client.put(self.detail_url(candidate), payload, format='json')
        self.assertEqual(response.status_code, self.status.HTTP_200_OK, response.data)
        self.assertEqual(response.data['stage'], INBOX)
        self.assertEqual(response.data['name'], 'Ali Rezaei')
        self.assertEqual(candidate.histories.get().action, 'details updated')

    def test_patch_is_not_allowed(self):
        candidate = CandidateFactory()
        response = self.client.patch(self.detail_url(candidate), {'rating': 1}, format='json')
        self.assertEqual(response.status_code, self.status.HTTP_405_METHOD_NOT_ALLOWED)

    def test_only_admin_deletes(self):
        candidate = CandidateFactory()
        response = self.client.delete(self.detail_url(candidate))
        self.assertEqual(response.status_code, self.status.HTTP_403_FORBIDDEN)

        self.client.force_login(self.admin)
        response = self.client.delete(self.detail_url(candidate))
        self.assertEqual(response.status_code, self.status.HTTP_204_NO_CONTENT)
        self.assertFalse(Candidate.objects.filter(id=candidate.id).exists())

    def test_filter_and_search(self):
        review = Stage.objects.get(slug=REVIEW)
        CandidateFactory(name='Sara Ahmadi', source='Referral', stage=review)
        CandidateFactory(name='Ali Rezaei', phone='09351112233', position='Designer')
        CandidateFactory(name='Maryam Hosseini', email='maryam@mail.example')
        url = reverse('api_v1:recruitment:candidate-list')

        for query, count in (
            ({}, 3),
            ({'stage': REVIEW}, 1),
            ({'stage': f'{REVIEW},{INBOX}'}, 3),
            ({'source': 'referral'}, 1),
            ({'position': 'Designer'}, 1),
            ({'search': 'ahmadi'}, 1),
            ({'search': '0935'}, 1),
            ({'search': 'mail.example'}, 1),
            ({'search': 'nobody'}, 0),
        ):
            with self.subTest(query=query):
                response = self.client.get(url, query)
                self.assertEqual(response.status_code, self.status.HTTP_200_OK)
                self.assertEqual(response.data['count'], count)

    def test_comments(self):
        candidate = CandidateFactory()
        url = self.detail_url(candidate, 'comments')
        response = self.client.post(url, {'text': 'Strong portfolio'}, format='json')
        self.assertEqual(response.status_code, self.status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data['user'], 'Sara')

        response = self.client.post(url, {'text': '  '}, format='json')
        self.assertEqual(response.status_code, self.status.HTTP_400_BAD_REQUEST)

        response = self.client.get(url)
        self.assertEqual(response.data['count'], 1)
        self.assertEqual(response.data['results'][0]['text'], 'Strong portfolio')

    def test_custom_history(self):
        candidate = CandidateFactory()
        url = self.detail_url(candidate, 'history')
        response = self.client.post(
            url, {'action': 'called the candidate', 'details': 'no answer'}, format='json'
        )
        self.assertEqual(response.status_code, self.status.HTTP_201_CREATED, response.data)

        response = self.client.post(url, {'action': '   '}, format='json')
        self.assertEqual(response.status_code, self.status.HTTP_400_BAD_REQUEST)

        response = self.client.get(url)
        self.assertEqual(response.data['count'], 1)
        self.assertEqual(response.data['results'][0]['user'], 'Sara')

    def test_test_result_upsert(self):
        candidate = CandidateFactory()
        url = self.detail_url(candidate, 'test-results')

        response = self.client.post(url, {'test_id': 'test-2', 'score': 70}, format='json')
        self.assertEqual(response.status_code, self.status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data['status'], NOT_SENT)
        self.assertEqual(response.data['test_name'], 'MBTI Test')

        response = self.client.post(
            url, {'test_id': 'test-2', 'status': PASSED, 'notes': 'good'}, format='json'
        )
        self.assertEqual(response.status_code, self.status.HTTP_201_CREATED, response.data)

        result = candidate.test_results.get()
        self.assertEqual(result.status, PASSED)
        self.assertEqual(result.score, 70)
        self.assertEqual(
            candidate.histories.first().action, 'test result for "MBTI Test" updated'
        )

        for payload in (
            {'test_id': 'unknown'},
            {'test_id': 'test-2', 'status': 'lost'},
            {'test_id': 'test-2', 'result_url': 'ftp://example.com/result'},
        ):
            with self.atomicSubTest(payload=payload):
                response = self.client.post(url, payload, format='json')
                self.assertEqual(response.status_code, self.status.HTTP_400_BAD_REQUEST)

    def test_send_tests(self):
        candidate = CandidateFactory(phone='')
        CandidateTestResultFactory(candidate=candidate, test_id='test-1', score=12)
        url = self.detail_url(candidate, 'send-tests')

        response = self.client.post(
            url, {'tests': ['test-1', 'test-3'], 'channel': WHATSAPP}, format='json'
        )
        self.assertEqual(response.status_code, self.status.HTTP_400_BAD_REQUEST)
        self.assertFalse(candidate.test_results.filter(status=PENDING).exists())

        response = self.client.post(
            url, {'tests': ['test-1', 'test-3'], 'deadline_hours': 24}, format='json'
        )
        self.assertEqual(response.status_code, self.status.HTTP_200_OK, response.data)
        self.assertTrue(response.data['result']['url'].startswith(f'mailto:{candidate.email}'))
        self.assertIn('24%20hours', response.data['result']['url'])
        self.assertEqual(
            set(candidate.test_results.values_list('test_id', 'status')),
            {('test-1', PENDING), ('test-3', PENDING)}
        )
        self.assertEqual(candidate.test_results.get(test_id='test-1').score, 12)
        self.assertEqual(candidate.histories.first().action, 'tests sent')

        response = self.client.post(url, {'tests': ['test-99']}, format='json')
        self.assertEqual(response.status_code, self.status.HTTP_400_BAD_REQUEST)

    def test_portal_token_is_generated_once(self):
        candidate = CandidateFactory()
        url = self.detail_url(candidate, 'portal-token')
        first = self.client.post(url)
        self.assertEqual(first.status_code, self.status.HTTP_200_OK)
        second = self.client.post(url)
        self.assertEqual(first.data['token'], second.data['token'])
        self.assertIn(f'candidateId={candidate.id}', first.data['url'])
        self.assertEqual(
            candidate.histories.filter(action='candidate portal link created').count(), 1
        )

    @override_settings(WHATSAPP_COUNTRY_CODE='98')
    def test_communicate(self):
        candidate = CandidateFactory(name='Sara Ahmadi', phone='09121234567')
        template = TemplateFactory(type=WHATSAPP, content='Hi {{candidateName}}')
        url = self.detail_url(candidate, 'communicate')

        response = self.client.post(
            url, {'channel': WHATSAPP, 'template': template.id}, format='json'
        )
        self.assertEqual(response.status_code, self.status.HTTP_200_OK, response.data)
        self.assertEqual(response.data['url'], 'https://wa.me/989121234567?text=Hi%20Sara%20Ahmadi')
        self.assertEqual(candidate.histories.get().action, 'whatsapp message prepared')

        for payload in (
            {'channel': EMAIL},
            {'channel': EMAIL, 'message': '   '},
            {'channel': EMAIL, 'template': 9999},
            {'channel': 'sms', 'message': 'Hello'},
        ):
            with self.atomicSubTest(payload=payload):
                response = self.client.post(url, payload, format='json')
                self.assertEqual(response.status_code, self.status.HTTP_400_BAD_REQUEST)

    def test_bulk_communicate(self):
        with_phone = CandidateFactory(name='Sara', phone='09121234567')
        without_phone = CandidateFactory(name='Ali', phone='')
        response = self.client.post(
            reverse('api_v1:recruitment:candidate-bulk-communicate'),
            {
                'candidates': [str(with_phone.id), str(without_phone.id)],
                'channel': WHATSAPP,
                'message': 'Reminder for {{candidateName}}'
            },
            format='json'
        )
        self.assertEqual(response.status_code, self.status.HTTP_200_OK, response.data)
        self.assertEqual(response.data['sent'], 1)
        results = {result['candidate']: result for result in response.data['results']}
        self.assertEqual(results[str(with_phone.id)]['message'], 'Reminder for Sara')
        self.assertFalse(results[str(without_phone.id)]['success'])

    def test_calendar(self):
        CandidateFactory(interview_date='1403/05/10', interview_time='10:00')
        CandidateFactory(interview_date='1403/05/31', interview_time='09:00')
        CandidateFactory(interview_date='1403/06/01', interview_time='09:00')
        url = reverse('api_v1:recruitment:candidate-calendar')

        response = self.client.get(url, {'start': '1403/05/01', 'end': '1403/05/31'})
        self.assertEqual(response.status_code, self.status.HTTP_200_OK, response.data)
        self.assertEqual(
            [item['interview_date'] for item in response.data],
            ['1403/05/10', '1403/05/31']
        )

        response = self.client.get(url, {'start': '1403/05/31', 'end': '1403/05/01'})
        self.assertEqual(response.status_code, self.status.HTTP_400_BAD_REQUEST)

    def test_summary(self):
        CandidateFactory.create_batch(2, source='LinkedIn')
        CandidateFactory(source='Referral', stage=Stage.objects.get(slug=HIRED))
        response = self.client.get(reverse('api_v1:recruitment:candidate-summary'))
        self.assertEqual(response.status_code, self.status.HTTP_200_OK)
        self.assertEqual(response.data['total'], 3)
        self.assertEqual(response.data['active'], 2)
        self.assertEqual(response.data['new_this_week'], 2)
        self.assertEqual(response.data['hired'], 1)
        self.assertEqual(response.data['sources'], [{'name': 'LinkedIn', 'count': 2}])
        counts = {stage['slug']: stage['count'] for stage in response.data['stages']}
        self.assertEqual(counts[INBOX], 2)
        self.assertEqual(counts[HIRED], 1)


class TestWeekRange(SimpleTestCase):
    def test_week_range(self):
        thursday = date(2024, 8, 1)
        self.assertEqual(
            get_week_range(thursday, calendar='jalali'), ('1403/05/06', '1403/05/12')
        )
        self.assertEqual(
            get_week_range(thursday, calendar='gregorian'), ('2024/07/29', '2024/08/04')
        )
        saturday = date(2024, 7, 27)
        self.assertEqual(get_week_range(saturday, calendar='jalali')[0], '1403/05/06')
