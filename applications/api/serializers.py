"""
Applications API Serializers.
"""

from decimal import Decimal

from rest_framework import serializers

from applications.models import Application
from policy.anonymization import (
    DEFAULT_SUFFIX_LENGTH,
    candidate_bio,
    candidate_display_name,
    candidate_location,
    display_name,
)
from policy.choices import ApplicationStatus


class ApplyInputSerializer(serializers.Serializer):
    """Payload accepted when submitting an application."""

    cover_letter = serializers.CharField(required=False, allow_blank=True, max_length=5000, default='')
    resume_url = serializers.URLField(required=False, allow_blank=True, allow_null=True, default=None)
    expected_salary = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0'),
        required=False,
        allow_null=True,
        default=None,
    )
    can_join_from = serializers.DateField(required=False, allow_null=True, default=None)


class ApplicationSerializer(serializers.ModelSerializer):
    """
    Application as its candidate sees it.

    The company name is redacted for the viewer; pass ``viewer_is_premium``
    and ``suffix_length`` in the context.
    """

    bucket = serializers.CharField(read_only=True)
    opportunity = serializers.SerializerMethodField()
    company_name = serializers.SerializerMethodField()

    class Meta:
        model = Application
        fields = [
            'id',
            'status',
            'bucket',
            'opportunity',
            'company_name',
            'cover_letter',
            'resume_url',
            'expected_salary',
            'can_join_from',
            'applied_at',
            'updated_at',
        ]

    def get_opportunity(self, obj):
        opportunity = obj.opportunity
        return {
            'id': opportunity.id,
            'title': opportunity.title,
            'type': opportunity.type,
            'work_type': opportunity.work_type,
        }

    def get_company_name(self, obj):
        return display_name(
            obj.industry,
            self.context.get('viewer_is_premium', False),
            suffix_length=self.context.get('suffix_length', DEFAULT_SUFFIX_LENGTH),
        )


class IndustryApplicationSerializer(serializers.ModelSerializer):
    """
    Application as the reviewing company sees it.

    The applicant is redacted unless the company is premium; pass
    ``viewer_is_premium`` in the context.
    """

    opportunity_title = serializers.CharField(source='opportunity.title', read_only=True)
    candidate = serializers.SerializerMethodField()

    class Meta:
        model = Application
        fields = [
            'id',
            'status',
            'applied_at',
            'opportunity_title',
            'candidate',
        ]

    def get_candidate(self, obj):
        candidate = obj.candidate
        is_premium = self.context.get('viewer_is_premium', False)
        return {
            'id': candidate.id,
            'display_name': candidate_display_name(candidate, is_premium),
            'location': candidate_location(candidate, is_premium),
            'bio': candidate_bio(candidate, is_premium),
            'skills': [skill.skill_name for skill in candidate.skills.all()],
            'is_anonymous': not is_premium,
        }


class ApplicationStatusInputSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=ApplicationStatus.choices)


class CandidateStatsSerializer(serializers.Serializer):
    pending = serializers.IntegerField()
    in_progress = serializers.IntegerField()
    selected = serializers.IntegerField()
    closed = serializers.IntegerField()
    total = serializers.IntegerField()
    saved = serializers.IntegerField()


class IndustryApplicationStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    pending = serializers.IntegerField()
    reviewed = serializers.IntegerField()
    shortlisted = serializers.IntegerField()
