from django.urls import path

from hireboard.recruitment.api.v1.views.setting import (
    RecruitmentSettingViewSet, RecruitmentSettingItemViewSet
)

urlpatterns = [
    path('',
         RecruitmentSettingViewSet.as_view({
             'get': 'retrieve',
             'put': 'update',
         }), name='settings'),
    path('sources/',
         RecruitmentSettingItemViewSet.as_view({'post': 'create'}, kind='sources'),
         name='settings-sources'),
    path('job-positions/',
         RecruitmentSettingItemViewSet.as_view({'post': 'create'}, kind='job_positions'),
         name='settings-job-positions'),
    path('tests/',
         RecruitmentSettingItemViewSet.as_view({'post': 'create'}, kind='tests'),
         name='settings-tests'),
]
