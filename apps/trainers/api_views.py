import logging

from django.shortcuts import get_object_or_404
from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.core.permissions import IsPortalAdmin
from apps.core.serializers import StatusSerializer

from .filters import TrainerFilter
from .models import Trainer
from .serializers import TrainerReferenceSerializer, TrainerRegistrationSerializer, TrainerSerializer

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([permissions.AllowAny])
def trainer_registration_view(request):
    """
    Trainer registration; answers with the generated unique id
    """
    serializer = TrainerRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    trainer = serializer.save()

    logger.info("Trainer %s registered (%s)", trainer.unique_id, trainer.district)
    return Response({'uniqueId': trainer.unique_id}, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsPortalAdmin])
def trainer_list_view(request):
    filterset = TrainerFilter(request.query_params, queryset=Trainer.objects.all(), request=request)
    return Response(TrainerSerializer(filterset.qs, many=True).data)


@api_view(['GET'])
@permission_classes([IsPortalAdmin])
def approved_trainer_list_view(request):
    trainers = Trainer.objects.approved().order_by('full_name')
    return Response(TrainerReferenceSerializer(trainers, many=True).data)


@api_view(['PATCH'])
@permission_classes([IsPortalAdmin])
def trainer_status_view(request, pk):
    trainer = get_object_or_404(Trainer, pk=pk)
    serializer = StatusSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    previous = trainer.set_status(serializer.validated_data['status'])
    logger.info(
        "Trainer %s status %s -> %s by %s",
        trainer.unique_id, previous, trainer.status, request.user,
    )
    return Response(TrainerSerializer(trainer).data)
