import logging

from django.shortcuts import get_object_or_404
from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.core.api import error_response
from apps.core.permissions import IsPortalAdmin
from apps.core.serializers import StatusSerializer
from apps.trainers.models import Trainer

from . import workflow
from .filters import InstitutionFilter
from .models import Institution
from .serializers import (
    InstitutionRegistrationSerializer,
    InstitutionSerializer,
    TrainerAssignmentSerializer,
)

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([permissions.AllowAny])
def institution_registration_view(request):
    """
    Institution registration; answers with the generated unique id
    """
    serializer = InstitutionRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    institution = serializer.save()

    logger.info("Institution %s registered (%s)", institution.unique_id, institution.district)
    return Response({'uniqueId': institution.unique_id}, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsPortalAdmin])
def institution_list_view(request):
    filterset = InstitutionFilter(
        request.query_params, queryset=Institution.objects.select_related('trainer'), request=request,
    )
    return Response(InstitutionSerializer(filterset.qs, many=True).data)


@api_view(['PATCH'])
@permission_classes([IsPortalAdmin])
def institution_status_view(request, pk):
    institution = get_object_or_404(Institution, pk=pk)
    serializer = StatusSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    workflow.set_status(institution, serializer.validated_data['status'], actor=request.user)
    return Response(InstitutionSerializer(institution).data)


@api_view(['PATCH'])
@permission_classes([IsPortalAdmin])
def institution_assign_trainer_view(request, pk):
    institution = get_object_or_404(Institution.objects.select_related('trainer'), pk=pk)
    serializer = TrainerAssignmentSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    trainer_id = serializer.validated_data['trainerId']
    trainer = None
    if trainer_id:
        trainer = Trainer.objects.filter(unique_id=trainer_id).first()
        if trainer is None:
            return error_response('Trainer not found', status.HTTP_404_NOT_FOUND)

    workflow.assign_trainer(institution, trainer, actor=request.user)
    return Response(InstitutionSerializer(institution).data)
