"""
Applications Admin.
"""

from django.contrib import admin

from .models import Application


@admin.register(Application)
class ApplicationAdmin(admin.ModelAdmin):
    list_display = ['candidate', 'opportunity', 'industry', 'status', 'applied_at']
    list_filter = ['status']
    search_fields = ['opportunity__title', 'industry__company_name', 'candidate__user__email']
    raw_id_fields = ['candidate', 'opportunity', 'industry']
    readonly_fields = ['applied_at', 'updated_at']
