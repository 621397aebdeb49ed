import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, status
from rest_framework.decorators import action
from rest_framework.response import Response

from hireboard.core.mixins.viewset_mixins import HireBoardModelViewSet, DisallowPatchMixin
from hireboard.recruitment.api.v1.filterset_classes import CandidateFilter
from hireboard.recruitment.api.v1.permissions import CandidatePermission
from hireboard.recruitment.api.v1.serializers.candidate import (
    CandidateSerializer, CandidateHistorySerializer, CandidateCommentSerializer,
    TestResultSerializer, CommunicateSerializer, BulkCommunicateSerializer,
    SendTestsSerializer, CalendarQuerySerializer, CandidateThinSerializer
)
from hireboard.recruitment.api.v1.serializers.stage_change import (
    StageChangePreviewSerializer, StageChangeSerializer
)
from hireboard.recruitment.models import Candidate, RecruitmentSetting
from hireboard.recruitment.utils import communication
from hireboard.recruitment.utils.summary import get_dashboard_summary, get_interviews_between
from hireboard.recruitment.utils.workflow import (
    request_stage_change, archive_candidate, unarchive_candidate
)

logger = logging.getLogger(__name__)


class CandidateViewSet(DisallowPatchMixin, HireBoardModelViewSet):
    """
    list:
    Candidates of the board, filter by `stage`, `source`, `position`,
    `interviewer` and `archived`, search by name, email or phone with `search`.

    create:
    New candidates start in the inbox.

    update:
    Whole record update. `stage` is read only, use the stage change actions.

    destroy:
    Admin only.

    stage_change_preview:
    What moving the candidate to `stage` would do, nothing is written.

    stage_change:
    Move the candidate to `stage`. Interview stages require `interview_date`
    and `interview_time`.
    """
    queryset = Candidate.objects.select_related('stage', 'interviewer')
    serializer_class = CandidateSerializer
    permission_classes = [CandidatePermission]
    filter_backends = (DjangoFilterBackend, filters.OrderingFilter)
    filterset_class = CandidateFilter
    ordering_fields = ('name', 'created_at', 'modified_at', 'rating', 'interview_date')
    ordering = ('-created_at',)

    def get_serializer_class(self):
        return {
            'stage_change_preview': StageChangePreviewSerializer,
            'stage_change': StageChangeSerializer,
            'comments': CandidateCommentSerializer,
            'history': CandidateHistorySerializer,
            'test_results': TestResultSerializer,
            'send_tests': SendTestsSerializer,
            'communicate': CommunicateSerializer,
            'bulk_communicate': BulkCommunicateSerializer,
            'calendar': CandidateThinSerializer,
        }.get(self.action, super().get_serializer_class())

    def get_serializer_context(self):
        context = super().get_serializer_context()
        if self.kwargs.get(self.lookup_field) and self.action in (
            'comments', 'history', 'test_results'
        ):
            context['candidate'] = self.get_object()
        return context

    def perform_destroy(self, instance):
        logger.info(f"Candidate {instance.id} deleted by {self.request.user.username}")
        super().perform_destroy(instance)

    def _stage_change_response(self, candidate, result):
        return Response({
            'candidate': CandidateSerializer(
                candidate, context=self.get_serializer_context()
            ).data,
            'noop': result['noop'],
            'results': result['results'],
        })

    @action(detail=True, methods=['post'], url_path='stage-change/preview')
    def stage_change_preview(self, request, *args, **kwargs):
        serializer = StageChangePreviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        workflow = request_stage_change(self.get_object(), data['stage'], user=request.user)
        return Response(workflow.preview(
            interview_date=data.get('interview_date') or None,
            interview_time=data.get('interview_time') or None,
        ))

    @action(detail=True, methods=['post'], url_path='stage-change')
    def stage_change(self, request, *args, **kwargs):
        serializer = StageChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        candidate = self.get_object()
        result = request_stage_change(
            candidate, serializer.validated_data['stage'], user=request.user
        ).confirm(**serializer.get_confirm_kwargs())
        return self._stage_change_response(result['candidate'], result)

    @action(detail=True, methods=['post'])
    def archive(self, request, *args, **kwargs):
        result = archive_candidate(self.get_object(), user=request.user)
        return self._stage_change_response(result['candidate'], result)

    @action(detail=True, methods=['post'])
    def unarchive(self, request, *args, **kwargs):
        candidate = unarchive_candidate(self.get_object(), user=request.user)
        return Response(
            CandidateSerializer(candidate, context=self.get_serializer_context()).data
        )

    def _list_or_create(self, request, queryset):
        if request.method == 'GET':
            page = self.paginate_queryset(queryset)
            serializer = self.get_serializer(page, many=True)
            return self.get_paginated_response(serializer.data)
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['get', 'post'])
    def comments(self, request, *args, **kwargs):
        return self._list_or_create(request, self.get_object().comments.all())

    @action(detail=True, methods=['get', 'post'])
    def history(self, request, *args, **kwargs):
        """Append only, entries are never changed or deleted."""
        return self._list_or_create(request, self.get_object().histories.all())

    @action(detail=True, methods=['get', 'post'], url_path='test-results')
    def test_results(self, request, *args, **kwargs):
        """POST upserts the result of `test_id`."""
        return self._list_or_create(request, self.get_object().test_results.all())

    @action(detail=True, methods=['post'], url_path='send-tests')
    def send_tests(self, request, *args, **kwargs):
        serializer = SendTestsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        candidate = self.get_object()
        result, test_results = communication.send_tests(
            candidate,
            serializer.validated_data['tests'],
            channel=serializer.validated_data['channel'],
            deadline_hours=serializer.validated_data.get('deadline_hours'),
            user=request.user
        )
        return Response({
            'result': result,
            'test_results': TestResultSerializer(
                test_results, many=True,
                context={'setting': RecruitmentSetting.get_solo(), 'request': request}
            ).data
        })

    @action(detail=True, methods=['post'], url_path='portal-token')
    def portal_token(self, request, *args, **kwargs):
        candidate = self.get_object()
        token = candidate.generate_portal_token(user=request.user)
        return Response({
            'token': token,
            'url': candidate.portal_url
        })

    @action(detail=True, methods=['post'])
    def communicate(self, request, *args, **kwargs):
        serializer = CommunicateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        results = communication.communicate(
            [self.get_object()],
            data['channel'],
            template=communication.get_template(data.get('template')),
            message=data.get('message'),
            subject=data.get('subject'),
            user=request.user
        )
        return Response(results[0])

    @action(detail=False, methods=['post'], url_path='bulk-communicate')
    def bulk_communicate(self, request, *args, **kwargs):
        serializer = BulkCommunicateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        results = communication.communicate(
            data['candidates'],
            data['channel'],
            template=communication.get_template(data.get('template')),
            message=data.get('message'),
            subject=data.get('subject'),
            user=request.user
        )
        return Response({
            'sent': len([result for result in results if result['success']]),
            'results': results
        })

    @action(detail=False, methods=['get'])
    def calendar(self, request, *args, **kwargs):
        """
        Candidates with an interview between `start` and `end`, both
        YYYY/MM/DD in the interview date calendar.
        """
        serializer = CalendarQuerySerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        queryset = get_interviews_between(
            serializer.validated_data['start'],
            serializer.validated_data['end'],
            queryset=self.get_queryset()
        )
        return Response(CandidateThinSerializer(queryset, many=True).data)

    @action(detail=False, methods=['get'])
    def summary(self, request, *args, **kwargs):
        return Response(get_dashboard_summary())
