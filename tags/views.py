# tags/views.py

from rest_framework.generics import CreateAPIView, ListAPIView
from .serializers import TagSerializer
from .models import Tag


# Вью для создания тега
class CreateTagView(CreateAPIView):
    queryset = Tag.objects.all()
    serializer_class = TagSerializer


# Вью для получения всех тегов
class GetTagsView(ListAPIView):
    queryset = Tag.objects.order_by('name')
    serializer_class = TagSerializer
