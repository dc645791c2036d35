# projects/urls.py

from django.urls import path
from .views import *

urlpatterns = [
    path('create-project/', CreateProjectView.as_view(), name='create-project'),
    path('get-my-projects-list/', GetMyProjectsListView.as_view(), name='get-my-projects-list'),
    path('team/<int:team_id>/get-projects/', GetTeamProjectsView.as_view(), name='get-team-projects'),
    path('project/<int:pk>/get-details/', GetProjectDetailsView.as_view(), name='get-project-details'),
    path('project/<int:pk>/change-info/', ChangeProjectView.as_view(), name='change-project-info'),
    path('project/<int:pk>/delete/', DeleteProjectView.as_view(), name='delete-project'),
]
