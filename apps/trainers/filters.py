from apps.core.filters import ReviewStatusFilter

from .models import Trainer


class TrainerFilter(ReviewStatusFilter):
    class Meta:
        model = Trainer
        fields = ['status', 'district']
