from django.contrib import admin

from .models import StudentAdmission


@admin.register(StudentAdmission)
class StudentAdmissionAdmin(admin.ModelAdmin):
    list_display = ['student_name', 'school_name', 'district', 'class_name', 'phone_no', 'created_at']
    list_filter = ['district', 'created_at']
    search_fields = ['student_name', 'school_name', 'father_name', 'phone_no']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'created_at'
