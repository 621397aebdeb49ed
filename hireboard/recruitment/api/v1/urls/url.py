from django.urls import path, include

app_name = 'recruitment'

urlpatterns = [
    path('candidates/', include('hireboard.recruitment.api.v1.urls.candidate')),
    path('stages/', include('hireboard.recruitment.api.v1.urls.stage')),
    path('templates/', include('hireboard.recruitment.api.v1.urls.template')),
    path('settings/', include('hireboard.recruitment.api.v1.urls.setting')),
]
