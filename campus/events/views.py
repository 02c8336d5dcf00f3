"""
events/views.py
───────────────
Campus event pages and the /api/events endpoint.

  • List with search        /events/
  • Create                  /events/new/
  • Edit                    /events/edit/<id>/
  • Delete (confirm + POST) /events/delete/<id>/
  • JSON CRUD               /api/events  (GET, POST, PUT ?id=, DELETE ?id=)
"""

import logging

from django.contrib import messages
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect, render

from core.http import BadJSON, add_form_control_class, json_body, json_error
from core.search import filter_records

from .forms import EventForm
from .models import Event

logger = logging.getLogger(__name__)


# ── Pages ─────────────────────────────────────────────────────────────────────

def event_list_view(req):
    query = req.GET.get('q', '').strip()
    events = filter_records(Event.objects.all(), query)
    return render(req, 'events/list.html', {
        'events': events,
        'query':  query,
    })


def event_form_view(req, event_id=None):
    """
    Create or edit an event.

    GET  /events/new/            – blank form
    GET  /events/edit/<id>/      – pre-filled form
    POST                         – validate, save, redirect to the list
    """
    instance = get_object_or_404(Event, pk=event_id) if event_id else None

    if req.method == 'POST':
        form = EventForm(req.POST, instance=instance)
        if form.is_valid():
            event = form.save()
            verb = 'updated' if instance else 'created'
            logger.info(f"Event {event.pk} {verb}: {event.title}")
            messages.success(req, f'Event "{event.title}" {verb} successfully.')
            return redirect('event_list')
        else:
            messages.error(req, 'Please fix the errors below.')
    else:
        form = EventForm(instance=instance)

    add_form_control_class(form)
    return render(req, 'events/form.html', {
        'form':     form,
        'instance': instance,
    })


def event_delete_view(req, event_id):
    """GET shows a confirmation page; POST deletes and returns to the list."""
    event = get_object_or_404(Event, pk=event_id)
    if req.method == 'POST':
        title = event.title
        event.delete()
        logger.info(f"Event {event_id} deleted: {title}")
        messages.success(req, f'Event "{title}" deleted.')
        return redirect('event_list')
    return render(req, 'events/confirm_delete.html', {'event': event})


# ── JSON API ──────────────────────────────────────────────────────────────────

def events_api(req):
    if req.method == 'GET':
        query = req.GET.get('q', '')
        events = filter_records(Event.objects.all(), query)
        return JsonResponse([e.to_dict() for e in events], safe=False)

    if req.method not in ('POST', 'PUT', 'DELETE'):
        return json_error('Method not allowed.', status=405)

    instance = None
    if req.method in ('PUT', 'DELETE'):
        try:
            instance = Event.objects.get(pk=int(req.GET.get('id', '')))
        except (Event.DoesNotExist, ValueError):
            return json_error('Event not found.', status=404)

    if req.method == 'DELETE':
        event_id = instance.pk
        instance.delete()
        logger.info(f"Event {event_id} deleted via API")
        return JsonResponse({'deleted': event_id})

    try:
        payload = json_body(req)
    except BadJSON as exc:
        return json_error(str(exc))

    data = {
        'title':       payload.get('title', instance.title if instance else ''),
        'description': payload.get('description', instance.description if instance else ''),
        'date':        payload.get('date', instance.date if instance else ''),
        'location':    payload.get('location', instance.location if instance else ''),
        'event_type':  payload.get('eventType', instance.event_type if instance else ''),
        'organizer':   payload.get('organizer', instance.organizer if instance else ''),
    }
    form = EventForm(data, instance=instance)
    if not form.is_valid():
        return json_error('Validation failed.', fields=form.errors.get_json_data())

    event = form.save()
    logger.info(f"Event {event.pk} saved via API: {event.title}")
    return JsonResponse(event.to_dict(), status=200 if instance else 201)
