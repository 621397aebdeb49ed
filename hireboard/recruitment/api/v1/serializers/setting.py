import uuid

from rest_framework import serializers

from hireboard.core.mixins.serializers import DynamicFieldsModelSerializer, DummySerializer
from hireboard.recruitment.models import RecruitmentSetting


def _new_id(prefix):
    return f'{prefix}-{uuid.uuid4().hex[:8]}'


class JobPositionSerializer(DummySerializer):
    id = serializers.CharField(max_length=100, required=False)
    title = serializers.CharField(max_length=255)


class TestLibraryItemSerializer(DummySerializer):
    id = serializers.CharField(max_length=100, required=False)
    name = serializers.CharField(max_length=255)
    url = serializers.URLField(max_length=500)


class CompanyProfileSerializer(DummySerializer):
    name = serializers.CharField(max_length=255)
    website = serializers.CharField(max_length=255, allow_blank=True, required=False)
    address = serializers.CharField(allow_blank=True, required=False)
    job_positions = JobPositionSerializer(many=True, required=False)


class RecruitmentSettingSerializer(DynamicFieldsModelSerializer):
    sources = serializers.ListField(
        child=serializers.CharField(max_length=255), allow_empty=True
    )
    company_profile = CompanyProfileSerializer()
    test_library = TestLibraryItemSerializer(many=True)

    class Meta:
        model = RecruitmentSetting
        fields = ('sources', 'company_profile', 'test_library', 'modified_at')
        read_only_fields = ('modified_at',)

    @staticmethod
    def _validate_unique(values, label):
        seen = set()
        for value in values:
            key = value.strip().lower()
            if key in seen:
                raise serializers.ValidationError(f'Duplicate {label} "{value}".')
            seen.add(key)

    def validate_sources(self, sources):
        sources = [source.strip() for source in sources if source.strip()]
        self._validate_unique(sources, 'source')
        return sources

    def validate_company_profile(self, profile):
        positions = profile.get('job_positions', [])
        self._validate_unique([position['title'] for position in positions], 'job position')
        profile['job_positions'] = [
            {'id': position.get('id') or _new_id('job'), 'title': position['title']}
            for position in positions
        ]
        return profile

    def validate_test_library(self, tests):
        self._validate_unique([test['name'] for test in tests], 'test')
        ids = [test['id'] for test in tests if test.get('id')]
        if len(ids) != len(set(ids)):
            raise serializers.ValidationError('Test ids must be unique.')
        return [
            {'id': test.get('id') or _new_id('test'), 'name': test['name'], 'url': test['url']}
            for test in tests
        ]

    def update(self, instance, validated_data):
        for attr in ('sources', 'company_profile', 'test_library'):
            if attr in validated_data:
                setattr(instance, attr, validated_data[attr])
        instance.save()
        return instance


class SettingItemCreateSerializer(DummySerializer):
    """
    Appends a single item to one of the lists of the settings.
    `kind` is passed in context and is one of sources, job_positions and tests.
    """
    name = serializers.CharField(max_length=255, required=False)
    title = serializers.CharField(max_length=255, required=False)
    url = serializers.URLField(max_length=500, required=False)

    @property
    def kind(self):
        return self.context['kind']

    @property
    def setting(self):
        return self.context['setting']

    def validate(self, attrs):
        required = {
            'sources': ('name',),
            'job_positions': ('title',),
            'tests': ('name', 'url'),
        }[self.kind]
        errors = {
            field: ['This field is required.']
            for field in required if not (attrs.get(field) or '').strip()
        }
        if errors:
            raise serializers.ValidationError(errors)

        value = attrs[required[0]].strip()
        existing = {
            'sources': lambda: self.setting.sources,
            'job_positions': lambda: [p.get('title', '') for p in self.setting.job_positions],
            'tests': lambda: [t.get('name', '') for t in self.setting.test_library],
        }[self.kind]()
        if value.lower() in {item.strip().lower() for item in existing}:
            raise serializers.ValidationError({
                required[0]: [f'"{value}" already exists.']
            })
        attrs[required[0]] = value
        return attrs

    def create(self, validated_data):
        setting = self.setting
        if self.kind == 'sources':
            item = validated_data['name']
            setting.sources = setting.sources + [item]
        elif self.kind == 'job_positions':
            item = {'id': _new_id('job'), 'title': validated_data['title']}
            profile = dict(setting.company_profile)
            profile['job_positions'] = setting.job_positions + [item]
            setting.company_profile = profile
        else:
            item = {
                'id': _new_id('test'),
                'name': validated_data['name'],
                'url': validated_data['url']
            }
            setting.test_library = setting.test_library + [item]
        setting.save()
        return item
