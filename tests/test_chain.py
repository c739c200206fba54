import pytest

from lldkit.chain import Cashier, Doctor, Medical, Patient, Reception


def _build_chain():
    cashier = Cashier()
    medical = Medical()
    medical.set_next(cashier)
    doctor = Doctor()
    doctor.set_next(medical)
    reception = Reception()
    reception.set_next(doctor)
    return reception


def test_new_patient_walks_whole_chain(capsys):
    patient = Patient(name="abc")
    _build_chain().execute(patient)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        'Reception registering patient "abc" ',
        'Doctor checking patient "abc" ',
        'Medical giving medicine to patient "abc" ',
        'Cashier getting money from patient "abc" ',
    ]
    assert patient.registration_done is True
    assert patient.doctor_checkup_done is False


def test_patient_already_checked(capsys):
    patient = Patient(name="abc", registration_done=True, doctor_checkup_done=True)
    _build_chain().execute(patient)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        'Patient "abc" registration is already done ',
        'Doctor checkup is already done for patient "abc" ',
        'Medicine already given to patient "abc" ',
        'Payment Done for patient "abc" ',
    ]


def test_cashier_ends_chain_without_next(capsys):
    Cashier().execute(Patient(name="zed"))
    assert capsys.readouterr().out == 'Cashier getting money from patient "zed" \n'


def test_missing_next_department_raises():
    with pytest.raises(RuntimeError):
        Reception().execute(Patient(name="abc"))


def test_set_next_links_departments():
    doctor = Doctor()
    cashier = Cashier()
    doctor.set_next(cashier)
    assert doctor.next is cashier