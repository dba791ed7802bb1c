"""
Accounts Admin - Admin configuration for accounts and profiles.
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import Account, Candidate, CandidateSkill, Industry


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ['user', 'user_type', 'is_premium', 'created_at']
    list_filter = ['user_type', 'is_premium']
    search_fields = ['user__email', 'user__username']
    raw_id_fields = ['user']


class CandidateSkillInline(admin.TabularInline):
    model = CandidateSkill
    extra = 0


@admin.register(Candidate)
class CandidateAdmin(admin.ModelAdmin):
    list_display = ['__str__', 'user', 'college', 'city', 'completion_badge']
    search_fields = ['user__email', 'first_name', 'last_name', 'college']
    readonly_fields = ['anonymous_id', 'created_at', 'updated_at']
    raw_id_fields = ['user']
    inlines = [CandidateSkillInline]

    def completion_badge(self, obj):
        pct = obj.get_completion().percentage
        if pct >= 80:
            color = 'green'
        elif pct >= 50:
            color = 'orange'
        else:
            color = 'red'
        return format_html(
            '<span style="color: {};">{}%</span>',
            color, pct
        )
    completion_badge.short_description = 'Completion'


@admin.register(Industry)
class IndustryAdmin(admin.ModelAdmin):
    list_display = ['company_name', 'industry', 'is_verified', 'show_company_name', 'anonymous_id']
    list_filter = ['is_verified', 'show_company_name', 'industry']
    search_fields = ['company_name', 'anonymous_id']
    readonly_fields = ['anonymous_id', 'created_at', 'updated_at']
    raw_id_fields = ['user']
