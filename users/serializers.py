# users/serializers.py

from rest_framework_simplejwt.tokens import RefreshToken
from management.exceptions import Conflict
from rest_framework import serializers
from django.utils.timezone import now
from .models import User, Action_type, User_action
from .utils import log_user_action


# Сериализатор для регистрации пользователя
class UserRegistrationSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True)
    email = serializers.EmailField(max_length=150)

    class Meta:
        model = User
        fields = ('id', 'name', 'email', 'password')
        read_only_fields = ('id',)

    def validate(self, data):
        if User.objects.filter(email__iexact=data['email']).exists():
            raise Conflict({'email_taken': 'Пользователь с таким email уже существует.'})

        return data
    
    def create(self, validated_data):
        password = validated_data.pop('password')

        user = User(**validated_data)
        user.set_password(password)
        user.save()

        log_user_action(
            user=user,
            action_name="Аккаунты",
            description="Пользователь создал аккаунт"
        )

        return user


# Сериализатор для входа пользователя в систему
class UserLoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate(self, data):
        email = data.get('email')
        password = data.get('password')

        user = User.objects.filter(email__iexact=email).first()

        if user is None or not user.check_password(password):
            raise serializers.ValidationError({'credentials': 'Неверный email или пароль.'})

        if not user.is_active:
            log_user_action(
                user=user, 
                action_name="Аккаунты", 
                description="Пользователь совершил попытку входа в систему",
                status='Отказано в доступе'
            )
            raise serializers.ValidationError({'blocked': 'Аккаунт временно заблокирован.'})
        
        data['user'] = user

        return data
    
    def create(self, validated_data):
        user = validated_data['user']

        user.last_login = now()
        user.save(update_fields=['last_login'])

        refresh_token = RefreshToken.for_user(user)

        log_user_action(
            user=user, 
            action_name="Аккаунты", 
            description="Пользователь вошел в систему"
        )

        return {
            'refresh_token' : str(refresh_token),
            'access_token' : str(refresh_token.access_token),
            'user_id' : user.id,
            'name' : user.name,
            'email' : user.email,
            'is_admin' : user.is_admin,
            'notifications_status' : user.notifications_status,
        }


# Сериализатор для профиля пользователя
class UserProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ['id', 'name', 'email', 'is_admin', 'notifications_status', 'date_joined', 'last_login']
        read_only_fields = ['id', 'email', 'is_admin', 'date_joined', 'last_login']

    def update(self, instance, validated_data):
        fields_changed = any(
            getattr(instance, field) != value for field, value in validated_data.items()
        )

        if fields_changed:
            instance = super().update(instance, validated_data)

            log_user_action(
                user=self.context['request'].user, 
                action_name="Аккаунты", 
                description="Пользователь изменил свои данные аккаунта"
            )

        return instance


# Сериализатор для списка пользователей (с признаком владельца команды)
class GetUsersSerializer(serializers.ModelSerializer):
    is_owner = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'name', 'email', 'is_admin', 'is_owner']

    def get_is_owner(self, obj):
        return obj.id in self.context.get('team_owner_ids', set())


# Сериализатор для получения типов действий пользователей в системе
class ActionTypesSerializer(serializers.ModelSerializer):
    class Meta:
        model = Action_type
        fields = ['id', 'name']


# Сериализатор для получения действий пользователей в системе
class GetUsersActionsSerializer(serializers.ModelSerializer):
    user_name = serializers.CharField(source='user.name', read_only=True)
    action_type_name = serializers.CharField(source='type.name', read_only=True)

    class Meta:
        model = User_action
        fields = ['id', 'date_of_issue', 'user_name', 'action_type_name', 'description', 'status']
