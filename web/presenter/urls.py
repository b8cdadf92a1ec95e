"""
URL configuration for presenter project.

Routes:
- /admin/ - Django admin (row, slide and track management)
- /slides/* - Slide row rendering and administrative JSON endpoints
- /spa/* - Spa audio playlist endpoints
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('slides/', include('slides_app.urls')),
    path('spa/', include('spa_app.urls')),
]
