from django.contrib import admin

from .models import Institution


@admin.register(Institution)
class InstitutionAdmin(admin.ModelAdmin):
    list_display = ['unique_id', 'insti_name', 'insti_type', 'district', 'status', 'trainer', 'created_at']
    list_filter = ['status', 'insti_type', 'district']
    search_fields = ['unique_id', 'insti_name', 'head_name', 'email']
    raw_id_fields = ['trainer']
    readonly_fields = ['unique_id', 'password', 'created_at', 'updated_at']
