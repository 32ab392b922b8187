import logging
from typing import Optional

from django.db import IntegrityError, transaction

from clinic.exceptions import Conflict
from clinic.models import Appointment

logger = logging.getLogger(__name__)

BOOKED_MESSAGE = 'Dentist already booked'


def slot_taken(dentist, date, time, *, exclude_id: Optional[int] = None) -> bool:
    qs = Appointment.objects.filter(dentist=dentist, date=date, time=time)
    if exclude_id is not None:
        qs = qs.exclude(pk=exclude_id)
    return qs.exists()


def save_appointment(serializer) -> Appointment:
    """Save a validated appointment serializer, refusing an occupied slot.

    Works for both create and update: the slot is the merge of the
    incoming values with the stored ones, and the appointment being
    updated never conflicts with itself.
    """
    instance = serializer.instance
    data = serializer.validated_data
    dentist = data.get('dentist', getattr(instance, 'dentist', None))
    date = data.get('date', getattr(instance, 'date', None))
    time = data.get('time', getattr(instance, 'time', None))
    exclude_id = instance.pk if instance is not None else None

    if slot_taken(dentist, date, time, exclude_id=exclude_id):
        logger.info('slot clash dentist=%s %s %s', getattr(dentist, 'pk', None), date, time)
        raise Conflict(BOOKED_MESSAGE)
    try:
        with transaction.atomic():
            return serializer.save()
    except IntegrityError:
        # Lost a race with a concurrent booking for the same slot
        raise Conflict(BOOKED_MESSAGE)
