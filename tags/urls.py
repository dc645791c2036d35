# tags/urls.py

from django.urls import path
from .views import *

urlpatterns = [
    path('create-tag/', CreateTagView.as_view(), name='create-tag'),
    path('get-tags/', GetTagsView.as_view(), name='get-tags'),
]
