from django.db import models
from django.db.models import QuerySet

from hireboard.common.models import BaseModel
from hireboard.core.validators import validate_title
from hireboard.recruitment.constants import ARCHIVED, INTERVIEW_STAGE_PREFIX


class StageQuerySet(QuerySet):
    def live(self):
        """Board columns, i.e. every stage but the archive."""
        return self.exclude(slug=ARCHIVED)


class Stage(BaseModel):
    """
    A column of the recruitment board. `slug` is the stable identifier
    referenced by candidates and templates, `order` is the column position.
    """
    slug = models.SlugField(max_length=100, unique=True)
    title = models.CharField(max_length=255, validators=[validate_title])
    is_core = models.BooleanField(default=False)
    order = models.PositiveSmallIntegerField(default=0, db_index=True)

    objects = StageQuerySet.as_manager()

    class Meta:
        ordering = ('order', 'id')

    def __str__(self):
        return self.title

    @property
    def is_interview(self):
        return self.slug.startswith(INTERVIEW_STAGE_PREFIX)
