# inventory/urls.py
from django.urls import path
from .views import StockListView, StockDetailView, count_objects_view

urlpatterns = [
    path('stocks', StockListView.as_view(), name='stock-list'),
    path('stocks/<str:item>', StockDetailView.as_view(), name='stock-detail'),

    # function-based view, no .as_view()
    path('count_objects', count_objects_view, name='count-objects'),
]
