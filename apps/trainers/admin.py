from django.contrib import admin

from .models import Trainer


@admin.register(Trainer)
class TrainerAdmin(admin.ModelAdmin):
    list_display = ['unique_id', 'full_name', 'district', 'phone_no', 'status', 'created_at']
    list_filter = ['status', 'district']
    search_fields = ['unique_id', 'full_name', 'email', 'phone_no']
    readonly_fields = ['unique_id', 'password', 'created_at', 'updated_at']
