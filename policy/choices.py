"""Enumerations shared by the policy functions and the models that store them."""

from django.db import models
from django.utils.translation import gettext_lazy as _


class UserType(models.TextChoices):
    CANDIDATE = 'CANDIDATE', _('Candidate')
    INDUSTRY = 'INDUSTRY', _('Industry')
    INSTITUTE = 'INSTITUTE', _('Institute')
    ADMIN = 'ADMIN', _('Admin')


class OpportunityType(models.TextChoices):
    INTERNSHIP = 'INTERNSHIP', _('Internship')
    PROJECT = 'PROJECT', _('Project')
    FREELANCING = 'FREELANCING', _('Freelancing')


class WorkType(models.TextChoices):
    REMOTE = 'REMOTE', _('Remote')
    ONSITE = 'ONSITE', _('On-site')
    HYBRID = 'HYBRID', _('Hybrid')


class ApprovalStatus(models.TextChoices):
    PENDING = 'PENDING', _('Pending')
    APPROVED = 'APPROVED', _('Approved')
    REJECTED = 'REJECTED', _('Rejected')


class Proficiency(models.TextChoices):
    BEGINNER = 'BEGINNER', _('Beginner')
    INTERMEDIATE = 'INTERMEDIATE', _('Intermediate')
    ADVANCED = 'ADVANCED', _('Advanced')
    EXPERT = 'EXPERT', _('Expert')


class ApplicationStatus(models.TextChoices):
    PENDING = 'PENDING', _('Pending')
    REVIEWED = 'REVIEWED', _('Reviewed')
    SHORTLISTED = 'SHORTLISTED', _('Shortlisted')
    INTERVIEW_SCHEDULED = 'INTERVIEW_SCHEDULED', _('Interview Scheduled')
    SELECTED = 'SELECTED', _('Selected')
    REJECTED = 'REJECTED', _('Rejected')
    WITHDRAWN = 'WITHDRAWN', _('Withdrawn')
