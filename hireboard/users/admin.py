from django.contrib import admin

from .models import User


class UserAdmin(admin.ModelAdmin):
    search_fields = ['username', 'name', 'email']
    list_display = ['username', 'name', 'email', 'is_admin', 'is_active']
    list_filter = ['is_admin', 'is_active']
    exclude = ['password']


admin.site.register(User, UserAdmin)
