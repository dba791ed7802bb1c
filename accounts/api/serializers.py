"""
Accounts API Serializers.
"""

from rest_framework import serializers

from accounts.models import Candidate, CandidateSkill


class CandidateSkillSerializer(serializers.ModelSerializer):

    class Meta:
        model = CandidateSkill
        fields = ['id', 'skill_name', 'proficiency', 'years_of_experience']


class ProfileCompletionSerializer(serializers.Serializer):
    """Serializes a :class:`policy.completion.ProfileCompletion`."""

    percentage = serializers.IntegerField()
    is_complete = serializers.BooleanField()
    missing_fields = serializers.ListField(child=serializers.CharField())


class CandidateProfileSerializer(serializers.ModelSerializer):
    """
    Candidate profile with skills and the computed completion.

    Pass ``completion`` in the serializer context to reuse an already
    computed score.
    """

    skills = CandidateSkillSerializer(many=True, read_only=True)
    is_premium = serializers.BooleanField(read_only=True)
    completion = serializers.SerializerMethodField()

    class Meta:
        model = Candidate
        fields = [
            'id',
            'anonymous_id',
            'first_name',
            'last_name',
            'phone',
            'date_of_birth',
            'bio',
            'city',
            'state',
            'country',
            'college',
            'degree',
            'field_of_study',
            'graduation_year',
            'cgpa',
            'resume_url',
            'portfolio_url',
            'linkedin_url',
            'github_url',
            'skills',
            'is_premium',
            'completion',
        ]

    def get_completion(self, obj):
        result = self.context.get('completion') or obj.get_completion()
        return ProfileCompletionSerializer(result).data
