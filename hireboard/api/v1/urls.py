from django.urls import path, include

from hireboard.users.api.v1.serializers.auth import CustomTokenRefreshView, \
    CustomTokenObtainView

app_name = 'api_v1'

urlpatterns = [
    # authentication urls
    # custom token obtain for authenticating user with username or email and password
    path('auth/', include((
        [
            path('obtain/', CustomTokenObtainView.as_view(), name='obtain'),
            path('refresh/', CustomTokenRefreshView.as_view(),
                 name='refresh'),
        ], 'jwt'))),

    # modules
    path('users/', include('hireboard.users.api.v1.urls')),

    # Recruitment
    path('recruitment/', include('hireboard.recruitment.api.v1.urls.url')),

    # Candidate portal, public
    path('portal/', include('hireboard.portal.api.v1.urls')),
]
