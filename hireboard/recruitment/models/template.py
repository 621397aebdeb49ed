from django.db import models

from hireboard.common.models import BaseModel
from hireboard.core.validators import validate_title
from hireboard.recruitment.constants import TEMPLATE_TYPE_CHOICES, EMAIL


class Template(BaseModel):
    name = models.CharField(max_length=255, validators=[validate_title])
    content = models.TextField()
    type = models.CharField(
        max_length=20, choices=TEMPLATE_TYPE_CHOICES, default=EMAIL, db_index=True
    )
    # templates bound to a stage are offered when a candidate enters it
    stage = models.ForeignKey(
        'recruitment.Stage',
        to_field='slug',
        related_name='templates',
        on_delete=models.SET_NULL,
        null=True,
        blank=True
    )

    class Meta:
        ordering = ('id',)

    def __str__(self):
        return self.name
