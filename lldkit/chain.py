"""Chain of responsibility: a patient passes through hospital departments."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass


def _q(text: str) -> str:
    return json.dumps(text)


@dataclass
class Patient:
    """A patient and the steps of their visit that are already done."""

    name: str
    registration_done: bool = False
    doctor_checkup_done: bool = False
    medicine_done: bool = False
    payment_done: bool = False


class Department(ABC):
    """A link in the chain that handles a patient and may pass them on."""

    def __init__(self) -> None:
        self.next: Department | None = None

    def set_next(self, next_department: Department) -> None:
        self.next = next_department

    @abstractmethod
    def execute(self, patient: Patient) -> None:
        """Handle the patient."""

    def _forward(self, patient: Patient) -> None:
        if self.next is None:
            raise RuntimeError(f"{type(self).__name__} has no next department")
        self.next.execute(patient)


class Reception(Department):
    """Registers the patient."""

    def execute(self, patient: Patient) -> None:
        if patient.registration_done:
            print(f"Patient {_q(patient.name)} registration is already done ")
            self._forward(patient)
            return
        print(f"Reception registering patient {_q(patient.name)} ")
        patient.registration_done = True
        self._forward(patient)


class Doctor(Department):
    """Checks the patient."""

    def execute(self, patient: Patient) -> None:
        if patient.doctor_checkup_done:
            print(f"Doctor checkup is already done for patient {_q(patient.name)} ")
            self._forward(patient)
            return
        print(f"Doctor checking patient {_q(patient.name)} ")
        patient.registration_done = True
        self._forward(patient)


class Medical(Department):
    """Gives the patient medicine."""

    def execute(self, patient: Patient) -> None:
        if patient.doctor_checkup_done:
            print(f"Medicine already given to patient {_q(patient.name)} ")
            self._forward(patient)
            return
        print(f"Medical giving medicine to patient {_q(patient.name)} ")
        patient.registration_done = True
        self._forward(patient)


class Cashier(Department):
    """Takes payment; the end of the chain."""

    def execute(self, patient: Patient) -> None:
        if patient.doctor_checkup_done:
            print(f"Payment Done for patient {_q(patient.name)} ")
            return
        print(f"Cashier getting money from patient {_q(patient.name)} ")