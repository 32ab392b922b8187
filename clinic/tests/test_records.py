"""
Integration tests for the patient, dentist and treatment endpoints.

Every resource offers the same list/create/read/update/delete
operations behind a bearer token.  The tests use Django REST
Framework's APIClient within the APITestCase base class.
"""
import datetime as dt
from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from ..authentication import issue_token
from ..models import Appointment, Dentist, Patient, Schedule, Treatment, User


class RecordsAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(username="desk", password="Sm1lePass", role="staff")
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(self.user)}")

    # ------------------------------------------------------------------
    # Patients
    # ------------------------------------------------------------------
    def test_patient_crud(self) -> None:
        resp = self.client.post(reverse("patients"), {
            "name": "Ana Lima", "contact": "555-0101", "age": 34, "gender": "F",
            "email": "ana@example.com", "medicalHistory": "Penicillin allergy",
        }, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        pid = resp.data["id"]
        self.assertEqual(resp.data["medicalHistory"], "Penicillin allergy")
        self.assertIn("createdAt", resp.data)

        resp = self.client.get(reverse("patient-detail", args=[pid]))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["name"], "Ana Lima")

        resp = self.client.put(reverse("patient-detail", args=[pid]), {"contact": "555-0199"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data["contact"], "555-0199")
        self.assertEqual(resp.data["name"], "Ana Lima")

        resp = self.client.get(reverse("patients"))
        self.assertEqual([p["id"] for p in resp.data], [pid])

        resp = self.client.delete(reverse("patient-detail", args=[pid]))
        self.assertEqual(resp.data, {"message": "Deleted"})
        self.assertFalse(Patient.objects.filter(pk=pid).exists())

    def test_patient_missing_fields(self) -> None:
        resp = self.client.post(reverse("patients"), {"age": 20}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data["message"], "Missing fields")
        self.assertEqual(sorted(resp.data["fields"]), ["contact", "name"])

    def test_patient_blank_age_and_markup(self) -> None:
        resp = self.client.post(reverse("patients"), {
            "name": "<span>Ben</span> Cruz", "contact": "555-0102", "age": "",
        }, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertIsNone(resp.data["age"])
        self.assertEqual(resp.data["name"], "Ben Cruz")

    def test_patient_search(self) -> None:
        Patient.objects.create(name="Ana Lima", contact="555-0101", email="ana@example.com")
        Patient.objects.create(name="Ben Cruz", contact="555-0202")
        resp = self.client.get(reverse("patients"), {"q": "ANA@"})
        self.assertEqual([p["name"] for p in resp.data], ["Ana Lima"])
        resp = self.client.get(reverse("patients"), {"q": "0202"})
        self.assertEqual([p["name"] for p in resp.data], ["Ben Cruz"])

    def test_unknown_records_are_404(self) -> None:
        for name in ("patient-detail", "dentist-detail", "treatment-detail"):
            url = reverse(name, args=[999])
            for method in ("get", "put", "delete"):
                resp = getattr(self.client, method)(url, {}, format="json")
                self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND, (name, method))
                self.assertFalse(resp.data["ok"])

    def test_deleting_patient_cascades_appointments(self) -> None:
        patient = Patient.objects.create(name="Ana Lima", contact="555-0101")
        dentist = Dentist.objects.create(name="Dr. Rao", specialization="Orthodontics")
        day = dt.date.today()
        Appointment.objects.create(patient=patient, dentist=dentist, date=day, time=dt.time(9), service="Checkup")
        block = Schedule.objects.create(title="Aligner fitting", date=day, patient=patient, dentist=dentist)

        self.client.delete(reverse("patient-detail", args=[patient.pk]))
        self.assertEqual(Appointment.objects.count(), 0)
        block.refresh_from_db()
        self.assertIsNone(block.patient)
        self.assertEqual(block.dentist, dentist)

    # ------------------------------------------------------------------
    # Dentists
    # ------------------------------------------------------------------
    def test_dentist_crud(self) -> None:
        resp = self.client.post(reverse("dentists"), {
            "name": "Dr. Rao", "specialization": "Orthodontics", "license": "DL-2231",
            "available": ["Mon", "Wed"],
        }, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        did = resp.data["id"]
        self.assertEqual(resp.data["available"], ["Mon", "Wed"])

        resp = self.client.put(reverse("dentist-detail", args=[did]), {"available": ["Fri"]}, format="json")
        self.assertEqual(resp.data["available"], ["Fri"])
        self.assertEqual(resp.data["license"], "DL-2231")

        resp = self.client.delete(reverse("dentist-detail", args=[did]))
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(Dentist.objects.count(), 0)

    def test_dentist_requires_specialization(self) -> None:
        resp = self.client.post(reverse("dentists"), {"name": "Dr. Rao"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data["fields"], ["specialization"])

    # ------------------------------------------------------------------
    # Treatments
    # ------------------------------------------------------------------
    def test_treatment_crud(self) -> None:
        resp = self.client.post(reverse("treatments"), {
            "name": "Bonding", "price": "190", "duration": "≥ 1.5 hour", "type": "SINGLE VISIT",
            "rating": "5.0",
        }, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        tid = resp.data["id"]
        self.assertEqual(resp.data["price"], Decimal("190.00"))
        self.assertIsNone(resp.data["rating"])
        self.assertEqual(resp.data["reviews"], 0)

        resp = self.client.put(reverse("treatment-detail", args=[tid]), {"price": "210.50"}, format="json")
        self.assertEqual(resp.data["price"], Decimal("210.50"))
        self.assertEqual(Treatment.objects.get(pk=tid).type, Treatment.TYPE_SINGLE)

        self.client.delete(reverse("treatment-detail", args=[tid]))
        self.assertFalse(Treatment.objects.exists())

    def test_treatment_validation(self) -> None:
        base = {"name": "Veneers", "price": "925", "duration": "≥ 1.5 hour", "type": "SINGLE VISIT"}
        resp = self.client.post(reverse("treatments"), dict(base, price="-1"), format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(resp.data["message"].startswith("price:"))
        resp = self.client.post(reverse("treatments"), dict(base, type="ONE VISIT"), format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(resp.data["message"].startswith("type:"))

    def test_records_require_authentication(self) -> None:
        self.client.credentials()
        for name in ("patients", "dentists", "treatments", "appointments", "schedules"):
            self.assertEqual(self.client.get(reverse(name)).status_code, status.HTTP_401_UNAUTHORIZED)
