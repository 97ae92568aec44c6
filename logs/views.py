# logs/views.py
from rest_framework import generics, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.exceptions import APIException
from django_filters.rest_framework import DjangoFilterBackend
from .serializers import ActivitySerializer, UserActivitySerializer
from .services import list_activities_for_user, list_all_activities
import logging

logger = logging.getLogger(__name__)


class ActivityListView(generics.ListAPIView):
    serializer_class = ActivitySerializer
    permission_classes = [AllowAny]
    filter_backends = [DjangoFilterBackend]
    filterset_fields = ['user']

    def get_queryset(self):
        return list_all_activities()

    def list(self, request, *args, **kwargs):
        try:
            return super().list(request, *args, **kwargs)
        except APIException:
            raise
        except Exception as e:
            logger.error(f"❌ Error fetching all activity logs: {e}")
            return Response({
                'message': 'Internal server error',
                'error': str(e)
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class UserActivityListView(generics.ListAPIView):
    serializer_class = UserActivitySerializer
    permission_classes = [AllowAny]

    def get_queryset(self):
        return list_activities_for_user(self.kwargs['user_id'])

    def list(self, request, *args, **kwargs):
        try:
            return super().list(request, *args, **kwargs)
        except Exception as e:
            logger.error(f"❌ Error fetching activity logs for user {self.kwargs['user_id']}: {e}")
            return Response({
                'message': 'Error fetching activity logs',
                'error': str(e)
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
