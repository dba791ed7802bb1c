"""
Opportunities Admin.
"""

from django.contrib import admin

from policy.choices import ApprovalStatus

from .models import Category, Location, Opportunity, OpportunitySkill, SavedOpportunity


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'color']
    prepopulated_fields = {'slug': ('name',)}


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    list_display = ['city', 'state', 'country']
    search_fields = ['city', 'state', 'country']


class OpportunitySkillInline(admin.TabularInline):
    model = OpportunitySkill
    extra = 0


@admin.register(Opportunity)
class OpportunityAdmin(admin.ModelAdmin):
    list_display = [
        'title', 'industry', 'type', 'work_type', 'is_active',
        'is_premium_only', 'approval_status', 'application_count', 'view_count',
    ]
    list_filter = ['type', 'work_type', 'is_active', 'is_premium_only', 'approval_status']
    search_fields = ['title', 'industry__company_name']
    raw_id_fields = ['industry']
    readonly_fields = ['application_count', 'view_count', 'created_at', 'updated_at']
    inlines = [OpportunitySkillInline]
    actions = ['approve']

    @admin.action(description='Approve selected opportunities')
    def approve(self, request, queryset):
        queryset.update(approval_status=ApprovalStatus.APPROVED)


@admin.register(SavedOpportunity)
class SavedOpportunityAdmin(admin.ModelAdmin):
    list_display = ['candidate', 'opportunity', 'saved_at']
    raw_id_fields = ['candidate', 'opportunity']
