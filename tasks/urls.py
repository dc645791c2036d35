# tasks/urls.py

from django.urls import path
from .views import *

urlpatterns = [
    path('create-task/', CreateTaskView.as_view(), name='create-task'),
    path('get-my-tasks/', GetMyTasksView.as_view(), name='get-my-tasks'),
    path('project/<int:project_id>/get-tasks/', GetProjectTasksView.as_view(), name='project-get-tasks'),
    path('task/<int:pk>/get-details/', GetTaskDetailsView.as_view(), name='get-task-details'),
    path('task/<int:pk>/change-info/', ChangeTaskView.as_view(), name='change-task-info'),
    path('task/<int:pk>/delete/', DeleteTaskView.as_view(), name='delete-task'),
]
