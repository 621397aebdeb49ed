import logging
import uuid

from django.db import transaction
from django.db.models import Max
from rest_framework.exceptions import ValidationError

from hireboard.recruitment.constants import ARCHIVED
from hireboard.recruitment.models import Stage

logger = logging.getLogger(__name__)


class StageRegistry:
    """
    Ordered set of board stages.

    Core stages (inbox, hired, rejected and the hidden archive) can be
    renamed but never deleted, and they keep their board position when the
    other stages are reordered.
    """

    def __init__(self):
        self.queryset = Stage.objects.all()

    def live(self):
        return self.queryset.live()

    def get(self, slug):
        try:
            return self.queryset.get(slug=slug)
        except Stage.DoesNotExist:
            raise ValidationError({
                'stage': f'Stage "{slug}" does not exist.'
            })

    @staticmethod
    def _clean_title(title):
        title = (title or '').strip()
        if not title:
            raise ValidationError({
                'title': 'Stage title may not be blank.'
            })
        return title

    def _validate_unique_title(self, title, exclude=None):
        qs = self.queryset.filter(title__iexact=title)
        if exclude:
            qs = qs.exclude(id=exclude.id)
        if qs.exists():
            raise ValidationError({
                'title': f'A stage titled "{title}" already exists.'
            })

    def _new_slug(self):
        slug = f'stage-{uuid.uuid4().hex[:8]}'
        while self.queryset.filter(slug=slug).exists():
            slug = f'stage-{uuid.uuid4().hex[:8]}'
        return slug

    @transaction.atomic
    def add(self, title):
        title = self._clean_title(title)
        self._validate_unique_title(title)

        last_order = self.live().aggregate(last=Max('order'))['last']
        order = 0 if last_order is None else last_order + 1

        archive = self.queryset.filter(slug=ARCHIVED).first()
        if archive and archive.order <= order:
            archive.order = order + 1
            archive.save(update_fields=['order', 'modified_at'])

        stage = Stage.objects.create(
            slug=self._new_slug(),
            title=title,
            is_core=False,
            order=order
        )
        logger.info(f"Stage {stage.slug} ({stage.title}) added.")
        return stage

    def update(self, slug, title):
        stage = self.get(slug)
        title = self._clean_title(title)
        self._validate_unique_title(title, exclude=stage)
        stage.title = title
        stage.save(update_fields=['title', 'modified_at', 'modified_by'])
        return stage

    def delete(self, slug):
        stage = self.get(slug)
        if stage.is_core:
            raise ValidationError({
                'stage': f'"{stage.title}" is a core stage and can not be deleted.'
            })
        if stage.candidates.exists():
            raise ValidationError({
                'stage': f'"{stage.title}" has candidates, move them before deleting the stage.'
            })
        stage.delete()
        logger.info(f"Stage {slug} deleted.")

    def _normalize(self):
        """Give every stage a distinct position, the archive last."""
        stages = list(self.queryset.order_by('order', 'id'))
        stages.sort(key=lambda stage: stage.slug == ARCHIVED)
        for position, stage in enumerate(stages):
            stage.order = position
        Stage.objects.bulk_update(stages, ['order'])
        return stages

    @transaction.atomic
    def reorder(self, new_order):
        """
        :param new_order: slugs of every non core, non archive stage in the
            desired order
        :return: live stages in their new order
        """
        stages = self._normalize()
        reorderable = [
            stage for stage in stages
            if not stage.is_core and stage.slug != ARCHIVED
        ]
        current = [stage.slug for stage in reorderable]
        new_order = list(new_order or [])
        if len(new_order) != len(current) or set(new_order) != set(current):
            raise ValidationError({
                'order': 'Order must contain every movable stage exactly once.'
            })

        by_slug = {stage.slug: stage for stage in reorderable}
        slots = [stage.order for stage in reorderable]
        for slot, slug in zip(slots, new_order):
            by_slug[slug].order = slot
        Stage.objects.bulk_update(reorderable, ['order'])
        return self.live().order_by('order', 'id')
