from copy import deepcopy

from django.db import models
from django.db.models import JSONField

from hireboard.common.models import TimeStampedModel
from hireboard.recruitment.constants import (
    DEFAULT_SOURCES, DEFAULT_COMPANY_PROFILE, DEFAULT_TEST_LIBRARY
)


class RecruitmentSetting(TimeStampedModel):
    """
    Single row holding the board wide settings.

    sources: list of source names
    company_profile: {name, website, address, job_positions: [{id, title}]}
    test_library: [{id, name, url}]
    """
    sources = JSONField(default=list, blank=True)
    company_profile = JSONField(default=dict, blank=True)
    test_library = JSONField(default=list, blank=True)

    def __str__(self):
        return self.company_name or 'Recruitment Setting'

    @classmethod
    def get_solo(cls):
        setting = cls.objects.order_by('id').first()
        if setting is None:
            setting = cls.objects.create(
                sources=list(DEFAULT_SOURCES),
                company_profile=deepcopy(DEFAULT_COMPANY_PROFILE),
                test_library=deepcopy(DEFAULT_TEST_LIBRARY),
            )
        return setting

    @property
    def company_name(self):
        return self.company_profile.get('name', '')

    @property
    def job_positions(self):
        return self.company_profile.get('job_positions', [])

    def get_test(self, test_id):
        return next(
            (test for test in self.test_library if test.get('id') == test_id),
            None
        )
