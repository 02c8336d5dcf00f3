from django import forms

from .models import Event


class EventForm(forms.ModelForm):
    """Create / edit form for a campus event."""

    class Meta:
        model  = Event
        fields = [
            'title',
            'description',
            'date',
            'location',
            'event_type',
            'organizer',
        ]
        widgets = {
            'title':       forms.TextInput(attrs={'placeholder': 'e.g. Freshmen orientation'}),
            'description': forms.Textarea(attrs={'rows': 3, 'placeholder': 'Optional details…'}),
            'date':        forms.DateTimeInput(attrs={'type': 'datetime-local'}, format='%Y-%m-%dT%H:%M'),
        }
        labels = {
            'event_type': 'Event type',
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Accept both the datetime-local widget value and ISO strings from the API
        self.fields['date'].input_formats = [
            '%Y-%m-%dT%H:%M',
            '%Y-%m-%dT%H:%M:%S',
            '%Y-%m-%d %H:%M:%S',
            '%Y-%m-%d %H:%M',
            '%Y-%m-%d',
        ]
