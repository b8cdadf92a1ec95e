"""
URL configuration for slides app.
"""
from django.urls import path
from . import views

app_name = 'slides'

urlpatterns = [
    path('rows/', views.list_rows, name='list_rows'),
    path('rows/reorder/', views.reorder_rows, name='reorder_rows'),
    path('rows/<int:row_id>/slides/visible/', views.visible_slides, name='visible_slides'),
    path('rows/<int:row_id>/slides/active/', views.active_slide, name='active_slide'),
    path('rows/<int:row_id>/slides/reorder/', views.reorder_slides, name='reorder_slides'),
    path('rows/<int:row_id>/slides/bulk-republish-temp/', views.bulk_republish_temp, name='bulk_republish_temp'),
    path('rows/<int:row_id>/slides/<int:slide_id>/temp-unpublish/', views.temp_unpublish_slide, name='temp_unpublish_slide'),
    path('bulk-publish/', views.bulk_publish, name='bulk_publish'),
]
