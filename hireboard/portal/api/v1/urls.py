from django.urls import path

from hireboard.portal.api.v1.views import CandidatePortalViewSet

app_name = 'portal'

urlpatterns = [
    path('<uuid:candidate_id>/<str:token>/',
         CandidatePortalViewSet.as_view({'get': 'retrieve'}),
         name='candidate-portal'),
    path('<uuid:candidate_id>/<str:token>/tests/<str:test_id>/',
         CandidatePortalViewSet.as_view({'post': 'submit_test'}),
         name='candidate-portal-test'),
]
