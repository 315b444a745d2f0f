from django.db import models


class RiskLevel(models.TextChoices):
    LOW = 'Low', 'Low'
    MEDIUM = 'Medium', 'Medium'
    HIGH = 'High', 'High'


class RecommendedAction(models.TextChoices):
    MONITOR = 'Monitor', 'Monitor'
    REQUEST_VERIFICATION = 'Request verification', 'Request verification'
    ESCALATE = 'Escalate', 'Escalate'


class PolicyCategory(models.TextChoices):
    AML = 'AML', 'Anti-Money Laundering'
    GEO = 'GEO', 'Geo-Location'
    KYC = 'KYC', 'Know Your Customer'
    LIFECYCLE = 'LIFECYCLE', 'Account Lifecycle'
