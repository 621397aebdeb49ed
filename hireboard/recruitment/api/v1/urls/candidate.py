from rest_framework.routers import DefaultRouter

from hireboard.recruitment.api.v1.views.candidate import CandidateViewSet

router = DefaultRouter()

router.register(
    '',
    CandidateViewSet,
    basename='candidate'
)

urlpatterns = router.urls
