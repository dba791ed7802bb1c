"""
Opportunities API Serializers.

Listings are always serialized from a :class:`policy.visibility.OpportunityView`
so the company block reaching the client is the redacted one.
"""

from rest_framework import serializers

from opportunities.models import Category, Location, OpportunitySkill, SavedOpportunity


class CategorySerializer(serializers.ModelSerializer):

    class Meta:
        model = Category
        fields = ['id', 'name', 'slug', 'color']


class LocationSerializer(serializers.ModelSerializer):

    class Meta:
        model = Location
        fields = ['id', 'city', 'state', 'country']


class OpportunitySkillSerializer(serializers.ModelSerializer):

    class Meta:
        model = OpportunitySkill
        fields = ['skill_name', 'is_required', 'min_level']


class OpportunityViewSerializer(serializers.Serializer):
    """
    Lightweight serializer for listing views.

    Reads from an OpportunityView; plain fields fall through to the wrapped
    opportunity.
    """

    id = serializers.IntegerField()
    title = serializers.CharField()
    type = serializers.CharField()
    work_type = serializers.CharField()
    stipend = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    currency = serializers.CharField()
    duration = serializers.CharField()
    is_premium_only = serializers.BooleanField()
    application_deadline = serializers.DateTimeField(allow_null=True)
    start_date = serializers.DateField(allow_null=True)
    application_count = serializers.IntegerField()
    view_count = serializers.IntegerField()
    created_at = serializers.DateTimeField()

    category = CategorySerializer(allow_null=True)
    location = LocationSerializer(allow_null=True)
    skills = OpportunitySkillSerializer(many=True)

    display_name = serializers.CharField()
    show_details = serializers.BooleanField()
    can_apply = serializers.BooleanField()
    company = serializers.DictField()


class OpportunityDetailSerializer(OpportunityViewSerializer):
    """
    Detailed serializer for the detail view.

    Adds the long text fields and, for candidates, the application they
    already hold for this opportunity (``existing_application`` in context).
    """

    description = serializers.CharField()
    requirements = serializers.CharField()
    existing_application = serializers.SerializerMethodField()

    def get_existing_application(self, obj):
        application = self.context.get('existing_application')
        if application is None:
            return None
        return {
            'id': application.id,
            'status': application.status,
            'applied_at': application.applied_at,
        }


class SavedOpportunitySerializer(serializers.ModelSerializer):
    """Saved entry with its redacted opportunity (``views`` in context)."""

    opportunity = serializers.SerializerMethodField()

    class Meta:
        model = SavedOpportunity
        fields = ['id', 'saved_at', 'opportunity']

    def get_opportunity(self, obj):
        view = self.context['views'][obj.opportunity_id]
        return OpportunityViewSerializer(view).data


class SaveOpportunityInputSerializer(serializers.Serializer):
    opportunity_id = serializers.IntegerField(min_value=1)
