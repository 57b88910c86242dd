import logging

from django.contrib.auth import login, logout
from rest_framework import permissions
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from .serializers import LoginSerializer

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([permissions.AllowAny])
def login_view(request):
    """
    Start an admin session
    """
    serializer = LoginSerializer(data=request.data, context={'request': request})
    if not serializer.is_valid():
        logger.warning(
            "Failed dashboard login for %s from %s",
            request.data.get('username', 'unknown'), request.META.get('REMOTE_ADDR'),
        )
        raise ValidationError(serializer.errors)

    user = serializer.validated_data['user']
    login(request, user)
    logger.info("Admin %s logged in", user.get_username())
    return Response({'user': {'username': user.get_username(), 'isSuperuser': user.is_superuser}})


@api_view(['POST'])
@permission_classes([permissions.AllowAny])
def logout_view(request):
    if request.user.is_authenticated:
        logger.info("Admin %s logged out", request.user.get_username())
    logout(request)
    return Response({'success': True})
