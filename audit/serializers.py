"""
Edit History Serializers
"""

from rest_framework import serializers


class LogRowSerializer(serializers.Serializer):
    """
    Read-only serializer for a LogRow (entry plus resolved display fields).
    """

    id = serializers.IntegerField(source='entry.id')
    user_id = serializers.IntegerField(source='entry.user_id')
    user_display = serializers.CharField()
    post_id = serializers.IntegerField(source='entry.post_id')
    post_title = serializers.CharField()
    action_type = serializers.CharField(source='entry.action_type')
    activity_name = serializers.CharField(source='entry.activity_name')
    user_ip = serializers.CharField(source='entry.user_ip', allow_null=True)
    location = serializers.CharField(source='entry.location', allow_null=True)
    action_time = serializers.DateTimeField(source='entry.action_time')
    action_time_display = serializers.CharField()
