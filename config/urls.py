# config/urls.py
from django.contrib import admin
from django.urls import path, include
from utils.views import welcome

urlpatterns = [
    path('', welcome, name='welcome'),
    path('admin/', admin.site.urls),
    path('api/', include('users.urls')),
    path('api/', include('inventory.urls')),
    path('api/', include('logs.urls')),
]
