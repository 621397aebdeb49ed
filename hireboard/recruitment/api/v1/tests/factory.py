import factory
from factory.django import DjangoModelFactory

from hireboard.recruitment.constants import EMAIL, INBOX, NOT_SENT
from hireboard.recruitment.models import (
    Stage, Template, Candidate, CandidateComment, TestResult
)


class StageFactory(DjangoModelFactory):
    class Meta:
        model = Stage
        django_get_or_create = ('slug',)

    slug = factory.Sequence(lambda n: f'stage-{n}')
    title = factory.Sequence(lambda n: f'Custom Stage {n}')
    is_core = False
    order = factory.Sequence(lambda n: 10 + n)


class TemplateFactory(DjangoModelFactory):
    class Meta:
        model = Template

    name = factory.Sequence(lambda n: f'Template {n}')
    content = 'Hello {{candidateName}}, welcome to {{stageName}}.'
    type = EMAIL
    stage = None


class CandidateFactory(DjangoModelFactory):
    class Meta:
        model = Candidate

    name = factory.Faker('name')
    email = factory.Sequence(lambda n: f'candidate{n}@example.com')
    phone = '09121234567'
    position = 'Senior React Developer'
    source = 'LinkedIn'
    stage = factory.LazyFunction(lambda: Stage.objects.get(slug=INBOX))


class CandidateCommentFactory(DjangoModelFactory):
    class Meta:
        model = CandidateComment

    candidate = factory.SubFactory(CandidateFactory)
    user = 'Admin'
    text = factory.Faker('sentence')


class CandidateTestResultFactory(DjangoModelFactory):
    class Meta:
        model = TestResult

    candidate = factory.SubFactory(CandidateFactory)
    test_id = 'test-1'
    status = NOT_SENT
