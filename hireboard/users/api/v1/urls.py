from rest_framework.routers import DefaultRouter

from hireboard.users.api.v1.views.user import UserViewSet

app_name = 'users'

router = DefaultRouter()
router.register('', UserViewSet, basename='users')

urlpatterns = router.urls
