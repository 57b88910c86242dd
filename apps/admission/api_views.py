import logging

from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.core.permissions import IsPortalAdmin

from .models import StudentAdmission
from .serializers import StudentAdmissionSerializer

logger = logging.getLogger(__name__)


class AdmissionPermission(permissions.BasePermission):
    """
    Anyone may submit, only admins may list
    """
    def has_permission(self, request, view):
        if request.method == 'POST':
            return True
        return IsPortalAdmin().has_permission(request, view)


@api_view(['GET', 'POST'])
@permission_classes([AdmissionPermission])
def student_admission_view(request):
    """
    POST: receive a student admission form
    GET: list received forms, newest first
    """
    if request.method == 'GET':
        admissions = StudentAdmission.objects.all().order_by('-created_at')
        serializer = StudentAdmissionSerializer(admissions, many=True)
        return Response(serializer.data)

    serializer = StudentAdmissionSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    admission = serializer.save()

    logger.info(
        "Student admission %s received from %s (%s)",
        admission.short_id, admission.school_name, admission.district,
    )
    return Response({'id': str(admission.id), 'success': True}, status=status.HTTP_200_OK)
