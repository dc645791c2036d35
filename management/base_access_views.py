# management/base_access_views.py

from rest_framework.generics import GenericAPIView
from rest_framework.permissions import IsAuthenticated
from .permissions import IsAdmin

class BaseAdminAccessView(GenericAPIView):
    permission_classes = [IsAuthenticated, IsAdmin]
