"""
URL configuration for spa app.
"""
from django.urls import path
from . import views

app_name = 'spa'

urlpatterns = [
    path('tracks/', views.list_tracks, name='list_tracks'),
    path('tracks/active/', views.active_track, name='active_track'),
    path('tracks/reorder/', views.reorder_tracks, name='reorder_tracks'),
]
