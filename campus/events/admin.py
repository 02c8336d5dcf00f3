"""
events/admin.py
───────────────
Admin for campus events.
"""

from django.contrib import admin

from .models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display  = ('title', 'date', 'location', 'event_type', 'organizer')
    list_filter   = ('event_type', 'date')
    search_fields = ('title', 'description', 'location', 'organizer')
    readonly_fields = ('created_at', 'updated_at')

    fieldsets = (
        (None, {
            'fields': ('title', 'description', 'date', 'location'),
        }),
        ('Classification', {
            'fields': ('event_type', 'organizer'),
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )
