# logs/serializers.py
from rest_framework import serializers
from .models import Activity

UNKNOWN_USER = 'Unknown User'
NO_STOCK = 'N/A'


class ActivitySerializer(serializers.ModelSerializer):
    """Row of the all-activities listing."""
    _id = serializers.UUIDField(source='id', read_only=True)
    userId = serializers.UUIDField(source='user_id', read_only=True)
    fullName = serializers.SerializerMethodField()
    objectCount = serializers.IntegerField(source='counted_amount', read_only=True)
    timestamp = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Activity
        fields = ['_id', 'userId', 'fullName', 'action', 'objectCount', 'timestamp']

    def get_fullName(self, obj):
        return getattr(obj.user, 'full_name', None) or UNKNOWN_USER


class UserActivitySerializer(ActivitySerializer):
    """Row of the per-user listing, with the counted stock item joined in.

    ``stock`` is None for logins and for items deleted after the count.
    """
    stockItem = serializers.SerializerMethodField()
    countedAmount = serializers.IntegerField(source='counted_amount', read_only=True)
    expectedStock = serializers.SerializerMethodField()
    detectedStock = serializers.SerializerMethodField()

    class Meta:
        model = Activity
        fields = [
            '_id', 'userId', 'fullName', 'action', 'stockItem', 'countedAmount',
            'expectedStock', 'detectedStock', 'timestamp',
        ]

    def get_stockItem(self, obj):
        return obj.stock.item if obj.stock else NO_STOCK

    def get_expectedStock(self, obj):
        return obj.stock.expected_count if obj.stock else 0

    def get_detectedStock(self, obj):
        return obj.stock.detected_count if obj.stock else 0
