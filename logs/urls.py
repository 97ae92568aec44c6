from django.urls import path
from .views import ActivityListView, UserActivityListView

urlpatterns = [
    path('activity_logs/', ActivityListView.as_view(), name='activity-list'),
    path('activity_logs/<str:user_id>', UserActivityListView.as_view(), name='user-activity-list'),
]
