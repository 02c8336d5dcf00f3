"""
events/models.py
────────────────
Campus events (orientation, exams, sports fests, …).
Events stand alone: they are not linked to students or payments.
"""

from django.db import models
from django.utils import dateformat, timezone


def format_event_date(value):
    """Long-form display date in the active locale, e.g. "January 5, 2025"."""
    if value is None:
        return ''
    if timezone.is_aware(value):
        value = timezone.localtime(value)
    return dateformat.format(value, 'F j, Y')


class Event(models.Model):
    """A single campus event."""

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    date = models.DateTimeField(help_text='When the event takes place.')
    location = models.CharField(max_length=200, blank=True)
    event_type = models.CharField(
        max_length=100,
        blank=True,
        verbose_name='Type',
        help_text='Free-form category, e.g. "Seminar" or "Sports".',
    )
    organizer = models.CharField(max_length=200, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['date', 'title']
        verbose_name = 'Event'
        verbose_name_plural = 'Events'

    def __str__(self):
        return f"{self.title} ({self.display_date})"

    @property
    def display_date(self):
        return format_event_date(self.date)

    @property
    def search_text(self):
        """Fields the events search runs over; the date is matched as displayed."""
        return (
            f"{self.title} {self.description} {self.display_date} "
            f"{self.location} {self.event_type} {self.organizer}"
        )

    def to_dict(self):
        return {
            'id':          self.pk,
            'title':       self.title,
            'description': self.description,
            'date':        self.date,
            'displayDate': self.display_date,
            'location':    self.location,
            'eventType':   self.event_type,
            'organizer':   self.organizer,
        }
