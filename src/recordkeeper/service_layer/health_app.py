"""Clinic demo: patients, prescriptions and a per-patient prescription lookup."""

from __future__ import annotations

from collections import defaultdict
from datetime import date, timedelta
import logging
from typing import TextIO

from recordkeeper.adapters.repository import KeyedRepository
from recordkeeper.domain.model import Patient, Prescription


logger = logging.getLogger(__name__)


class HealthSystemApp:
    def __init__(self, out: TextIO, *, today: date | None = None) -> None:
        self.out = out
        self.today = today or date.today()
        self.patients: KeyedRepository[int, Patient] = KeyedRepository("Patient")
        self.prescriptions: KeyedRepository[int, Prescription] = KeyedRepository("Prescription")
        self._prescription_map: dict[int, list[Prescription]] = {}

    def seed_data(self) -> None:
        self.patients.add(Patient(id=1, name="John Doe", age=45, gender="Male"))
        self.patients.add(Patient(id=2, name="Jane Smith", age=32, gender="Female"))
        self.patients.add(Patient(id=3, name="Robert Johnson", age=60, gender="Male"))

        for prescription_id, patient_id, medication, days_ago in (
            (101, 1, "Ibuprofen", 5),
            (102, 1, "Amoxicillin", 3),
            (103, 2, "Lisinopril", 10),
            (104, 2, "Metformin", 0),
            (105, 3, "Atorvastatin", 1),
        ):
            self.prescriptions.add(
                Prescription(
                    id=prescription_id,
                    patient_id=patient_id,
                    medication_name=medication,
                    date_issued=self.today - timedelta(days=days_ago),
                )
            )

    def build_prescription_map(self) -> dict[int, list[Prescription]]:
        """Group prescriptions by patient id, keeping issue order per patient."""
        grouped: dict[int, list[Prescription]] = defaultdict(list)
        for prescription in self.prescriptions.list():
            grouped[prescription.patient_id].append(prescription)
        self._prescription_map = dict(grouped)
        logger.debug("Built prescription map for %d patients", len(self._prescription_map))
        return self._prescription_map

    def get_prescriptions_by_patient_id(self, patient_id: int) -> list[Prescription]:
        return list(self._prescription_map.get(patient_id, []))

    def print_all_patients(self) -> None:
        print("All Patients:", file=self.out)
        print("------------", file=self.out)
        for patient in self.patients.list():
            print(patient, file=self.out)
        print(file=self.out)

    def print_prescriptions_for_patient(self, patient_id: int) -> None:
        patient = self.patients.get(patient_id)
        if patient is None:
            print(f"Patient with ID {patient_id} not found.", file=self.out)
            return

        print(f"Prescriptions for {patient.name}:", file=self.out)
        print("---------------------------------", file=self.out)

        prescriptions = self.get_prescriptions_by_patient_id(patient_id)
        if not prescriptions:
            print("No prescriptions found for this patient.", file=self.out)
        else:
            for prescription in prescriptions:
                print(prescription, file=self.out)
        print(file=self.out)


def parse_patient_id(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def run(
    out: TextIO,
    input_stream: TextIO,
    *,
    default_patient_id: int = 1,
    today: date | None = None,
) -> int:
    """Run the clinic demo and return the patient id that was shown."""
    app = HealthSystemApp(out, today=today)
    app.seed_data()
    app.build_prescription_map()
    app.print_all_patients()

    print("Enter Patient ID to view prescriptions (1-3):", file=out)
    patient_id = parse_patient_id(input_stream.readline())
    if patient_id is None:
        print(
            f"Invalid input. Showing prescriptions for Patient ID {default_patient_id} as example.",
            file=out,
        )
        patient_id = default_patient_id
    app.print_prescriptions_for_patient(patient_id)
    return patient_id
