"""Clinic application for the Classic Dental backend.

Models, serializers, views and URL routes for the scheduling and
records API used by the clinic's front desk application.
"""
