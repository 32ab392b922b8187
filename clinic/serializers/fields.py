"""
Serializer fields tolerant of the front-end's form payloads.

Form inputs left empty arrive as ``""`` rather than ``null``; the
``Optional*`` fields accept that for nullable values.  ``CleanCharField``
strips markup from free text before it is stored.
"""
import bleach
from rest_framework import serializers


class BlankAsNullMixin:
    def validate_empty_values(self, data):
        if data == '' and self.allow_null:
            data = None
        return super().validate_empty_values(data)


class OptionalIntegerField(BlankAsNullMixin, serializers.IntegerField):
    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        super().__init__(**kwargs)


class OptionalDateField(BlankAsNullMixin, serializers.DateField):
    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        super().__init__(**kwargs)


class OptionalTimeField(BlankAsNullMixin, serializers.TimeField):
    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        kwargs.setdefault('format', '%H:%M')
        super().__init__(**kwargs)


class CleanCharField(serializers.CharField):
    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        return bleach.clean(value, strip=True)
