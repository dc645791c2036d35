# dashboard/serializers.py

from rest_framework import serializers


# Сериализатор для распределения проектов или задач по статусам
class StatusDistributionSerializer(serializers.Serializer):
    status = serializers.CharField()
    count = serializers.IntegerField()


# Сериализатор для сводки на главной странице
class DashboardStatsSerializer(serializers.Serializer):
    projects = serializers.IntegerField()
    created_projects = serializers.IntegerField()
    tasks = serializers.IntegerField()
    created_tasks = serializers.IntegerField()
    completed = serializers.IntegerField()
    in_progress = serializers.IntegerField()
    projects_by_status = StatusDistributionSerializer(many=True)
    tasks_by_status = StatusDistributionSerializer(many=True)


# Сериализатор для количества закрытых задач по командам
class ClosedByTeamSerializer(serializers.Serializer):
    team_id = serializers.IntegerField()
    team_name = serializers.CharField(source='team__name')
    count = serializers.IntegerField()


# Сериализатор для количества закрытых задач по исполнителям
class ClosedByOwnerSerializer(serializers.Serializer):
    owner_id = serializers.IntegerField(source='owners__id')
    owner_name = serializers.CharField(source='owners__name')
    count = serializers.IntegerField()


# Сериализатор для отчета за последнюю неделю
class ReportOverviewSerializer(serializers.Serializer):
    completed_last_week = serializers.IntegerField()
    pending_tasks = serializers.IntegerField()
    closed_by_team = ClosedByTeamSerializer(many=True)
    closed_by_owner = ClosedByOwnerSerializer(many=True)
