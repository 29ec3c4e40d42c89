from django.contrib import admin
from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """Admin interface for platform users."""

    list_display = ['username', 'name']
    search_fields = ['username', 'name']
    ordering = ['username']
