# teams/urls.py

from django.urls import path
from .views import *

urlpatterns = [
    path('get-my-teams/', GetMyTeamsView.as_view(), name='get-my-teams'),
    path('create-team/', CreateTeamView.as_view(), name='create-team'),
    path('team/add-member/', AddTeamMemberView.as_view(), name='team-add-member'),
    path('team/<int:pk>/get-details/', GetTeamDetailsView.as_view(), name='get-team-details'),
    path('team/<int:pk>/delete/', DeleteTeamView.as_view(), name='delete-team'),
]
