from rest_framework.routers import DefaultRouter

from hireboard.recruitment.api.v1.views.template import TemplateViewSet

router = DefaultRouter()

router.register(
    '',
    TemplateViewSet,
    basename='template'
)

urlpatterns = router.urls
