from rest_framework.routers import DefaultRouter

from hireboard.recruitment.api.v1.views.stage import StageViewSet

router = DefaultRouter()

router.register(
    '',
    StageViewSet,
    basename='stage'
)

urlpatterns = router.urls
