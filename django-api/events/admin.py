from django.contrib import admin

from events.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "date", "created_at"]
    list_filter = ["date"]
    search_fields = ["title"]
    ordering = ["date", "created_at"]
