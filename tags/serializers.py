# tags/serializers.py

from management.exceptions import Conflict
from rest_framework import serializers
from users.utils import log_user_action
from .models import Tag


# Сериализатор для тегов
class TagSerializer(serializers.ModelSerializer):
    name = serializers.CharField(max_length=50)

    class Meta:
        model = Tag
        fields = ['id', 'name', 'color']

    def validate(self, data):
        if Tag.objects.filter(name=data['name']).exists():
            raise Conflict({'tag_exists': 'Тег с таким названием уже существует.'})

        return data

    def create(self, validated_data):
        tag = super().create(validated_data)

        log_user_action(
            user=self.context['request'].user,
            action_name="Теги",
            description=f"Пользователь создал тег «{tag.name}»"
        )

        return tag
