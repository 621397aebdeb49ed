from django.contrib import admin

from .models import (
    Stage, RecruitmentSetting, Template, Candidate, CandidateHistory,
    CandidateComment, TestResult
)


class StageAdmin(admin.ModelAdmin):
    list_display = ['slug', 'title', 'order', 'is_core']
    ordering = ['order']


class TemplateAdmin(admin.ModelAdmin):
    search_fields = ['name', 'content']
    list_display = ['name', 'type', 'stage']
    list_filter = ['type', 'stage']


class CandidateHistoryInline(admin.TabularInline):
    model = CandidateHistory
    readonly_fields = ['user', 'action', 'details', 'timestamp']
    extra = 0
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


class CandidateCommentInline(admin.TabularInline):
    model = CandidateComment
    extra = 0


class TestResultInline(admin.TabularInline):
    model = TestResult
    exclude = ['created_by', 'modified_by']
    extra = 0


class CandidateAdmin(admin.ModelAdmin):
    search_fields = ['name', 'email', 'phone']
    list_display = ['name', 'email', 'position', 'stage', 'interview_date', 'rating']
    list_filter = ['stage', 'source']
    exclude = ['created_by', 'modified_by']
    # moved by the stage change workflow and the reminder task only
    readonly_fields = [
        'stage', 'interview_time_changed', 'candidate_reminder_sent',
        'interviewer_reminder_sent', 'portal_token'
    ]
    inlines = [TestResultInline, CandidateCommentInline, CandidateHistoryInline]


admin.site.register(Stage, StageAdmin)
admin.site.register(RecruitmentSetting)
admin.site.register(Template, TemplateAdmin)
admin.site.register(Candidate, CandidateAdmin)
