"""@hireboard_docs"""
from dateutil.relativedelta import relativedelta, MO, SA
from django.conf import settings
from django.db.models import Count
from django.utils import timezone

from hireboard.core.utils import jalali
from hireboard.core.utils.common import get_today
from hireboard.recruitment.constants import HIRED, REJECTED, ARCHIVED
from hireboard.recruitment.models import Candidate
from hireboard.recruitment.utils.stages import StageRegistry

INACTIVE_STAGES = (HIRED, REJECTED, ARCHIVED)
TOP_SOURCES = 5
OTHER_SOURCES = 'Other'
UNKNOWN_SOURCE = 'Unknown'


def get_week_range(today=None, calendar=None):
    """
    First and last day of the current week as interview date strings. Jalali
    weeks start on Saturday, gregorian weeks on Monday.
    """
    calendar = calendar or settings.INTERVIEW_DATE_CALENDAR
    today = today or get_today()
    start = today + relativedelta(weekday=SA(-1) if calendar == jalali.JALALI else MO(-1))
    end = start + timezone.timedelta(days=6)
    return (
        jalali.date_to_string(start, calendar),
        jalali.date_to_string(end, calendar)
    )


def get_interviews_between(start, end, queryset=None):
    """
    Candidates with an interview between the interview date strings start and
    end, both inclusive. Zero padded dates compare in date order.
    """
    queryset = Candidate.objects.all() if queryset is None else queryset
    return queryset.exclude(stage_id=ARCHIVED).filter(
        interview_date__gte=start,
        interview_date__lte=end
    ).exclude(interview_date='').order_by('interview_date', 'interview_time')


def _source_counts(active):
    counts = list(
        active.values('source').annotate(count=Count('id')).order_by('-count', 'source')
    )
    sources = [
        {'name': item['source'] or UNKNOWN_SOURCE, 'count': item['count']}
        for item in counts[:TOP_SOURCES]
    ]
    others = sum(item['count'] for item in counts[TOP_SOURCES:])
    if others:
        sources.append({'name': OTHER_SOURCES, 'count': others})
    return sources


def get_dashboard_summary():
    candidates = Candidate.objects.all()
    active = candidates.exclude(stage_id__in=INACTIVE_STAGES)
    week_start, week_end = get_week_range()
    stage_counts = dict(
        candidates.order_by().values_list('stage_id').annotate(count=Count('id'))
    )
    return {
        'total': candidates.exclude(stage_id=ARCHIVED).count(),
        'active': active.count(),
        'new_this_week': active.filter(
            created_at__gte=timezone.now() - timezone.timedelta(days=7)
        ).count(),
        'interviews_this_week': get_interviews_between(week_start, week_end).count(),
        'hired': stage_counts.get(HIRED, 0),
        'archived': stage_counts.get(ARCHIVED, 0),
        'stages': [
            {
                'slug': stage.slug,
                'title': stage.title,
                'count': stage_counts.get(stage.slug, 0)
            }
            for stage in StageRegistry().live()
        ],
        'sources': _source_counts(active),
    }
