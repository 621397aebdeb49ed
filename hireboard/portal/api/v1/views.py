import logging
import secrets

from django.db.models import Q
from django.shortcuts import get_object_or_404
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from hireboard.portal.api.v1.serializers import (
    PortalCandidateSerializer, PortalTestSubmitSerializer
)
from hireboard.recruitment.constants import PORTAL_TEST_STATUSES, SUBMITTED, TEST_SUBMITTED
from hireboard.recruitment.models import Candidate, RecruitmentSetting

logger = logging.getLogger(__name__)


class CandidatePortalViewSet(GenericViewSet):
    """
    retrieve:
    Public view of a candidate's own application, authorized by the portal
    token. Lists the tests assigned to the candidate.

    submit_test:
    Submit the result link of an assigned test.
    """
    permission_classes = [AllowAny]
    authentication_classes = []
    serializer_class = PortalCandidateSerializer
    queryset = Candidate.objects.select_related('stage')

    def get_object(self):
        token = self.kwargs.get('token') or ''
        candidate = get_object_or_404(
            self.get_queryset().exclude(portal_token=''),
            id=self.kwargs.get('candidate_id')
        )
        if not secrets.compare_digest(candidate.portal_token, token):
            raise NotFound
        return candidate

    @staticmethod
    def get_assigned_results(candidate):
        return candidate.test_results.filter(
            Q(status__in=PORTAL_TEST_STATUSES) | ~Q(result_url='')
        )

    def get_tests(self, candidate, setting):
        tests = []
        for result in self.get_assigned_results(candidate):
            test = setting.get_test(result.test_id)
            if not test:
                continue
            tests.append({
                'test_id': result.test_id,
                'name': test.get('name'),
                'url': test.get('url'),
                'status': result.status,
                'result_url': result.result_url,
                'sent_date': result.sent_date,
                'deadline_hours': result.deadline_hours,
            })
        return tests

    def retrieve(self, request, *args, **kwargs):
        candidate = self.get_object()
        setting = RecruitmentSetting.get_solo()
        serializer = self.get_serializer(
            candidate,
            context={'setting': setting, 'tests': self.get_tests(candidate, setting)}
        )
        return Response(serializer.data)

    def submit_test(self, request, *args, **kwargs):
        candidate = self.get_object()
        test_id = self.kwargs.get('test_id')
        result = self.get_assigned_results(candidate).filter(test_id=test_id).first()
        if not result:
            raise NotFound

        serializer = PortalTestSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result.result_url = serializer.validated_data['result_url']
        result.status = SUBMITTED
        result.save()

        test = RecruitmentSetting.get_solo().get_test(test_id) or {}
        candidate.add_history(TEST_SUBMITTED.format(test=test.get('name', test_id)))
        logger.info(f"Candidate {candidate.id} submitted test {test_id}.")
        return Response({
            'test_id': test_id,
            'status': result.status,
            'result_url': result.result_url
        })
