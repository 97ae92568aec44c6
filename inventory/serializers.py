from rest_framework import serializers
from .models import Stock


class StockSerializer(serializers.ModelSerializer):
    _id = serializers.UUIDField(source='id', read_only=True)
    expectedCount = serializers.IntegerField(source='expected_count')
    detectedCount = serializers.IntegerField(source='detected_count', read_only=True)

    class Meta:
        model = Stock
        fields = ['_id', 'item', 'expectedCount', 'detectedCount']
