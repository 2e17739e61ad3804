"""
Static directories: canned identities per role and the doctor roster.
"""

from typing import Tuple

from telehealth.config import ROLES
from telehealth.models import Doctor, Identity


# ── Identity directory ───────────────────────────────────────────────

IDENTITIES = {
    "patient": Identity(
        id="P001",
        display_name="Rajesh Kumar",
        role="patient",
        contact_handle="+91 9876543210",
        avatar="https://images.pexels.com/photos/2379004/pexels-photo-2379004.jpeg?auto=compress&cs=tinysrgb&w=400",
    ),
    "doctor": Identity(
        id="D001",
        display_name="Dr. Amrit Kaur",
        role="doctor",
        email="dr.amrit@telemedicine.com",
        avatar="https://images.pexels.com/photos/5327580/pexels-photo-5327580.jpeg?auto=compress&cs=tinysrgb&w=400",
    ),
    "pharmacy": Identity(
        id="PH001",
        display_name="Khanna Medical Store",
        role="pharmacy",
        email="khanna.medical@gmail.com",
        avatar="https://images.pexels.com/photos/4167541/pexels-photo-4167541.jpeg?auto=compress&cs=tinysrgb&w=400",
    ),
    "admin": Identity(
        id="ADM001",
        display_name="System Administrator",
        role="admin",
        email="admin@telemedicine.com",
        avatar="https://images.pexels.com/photos/1181519/pexels-photo-1181519.jpeg?auto=compress&cs=tinysrgb&w=400",
    ),
}


def identity_for_role(role: str) -> Identity:
    """Return the canned identity for *role*."""
    if role not in ROLES:
        raise ValueError(f"Unknown role: {role}")
    return IDENTITIES[role]


# ── Doctor directory ─────────────────────────────────────────────────

DOCTORS: Tuple[Doctor, ...] = (
    Doctor(
        id="doc1",
        name="Dr. Amrit Kaur",
        name_hi="डॉ. अमृत कौर",
        name_pa="ਡਾ. ਅੰਮ੍ਰਿਤ ਕੌਰ",
        specialty="General Medicine",
        specialty_hi="सामान्य चिकित्सा",
        specialty_pa="ਜਨਰਲ ਮੈਡੀਸਨ",
        qualification="MBBS, MD",
        experience_years=12,
        rating=4.8,
        total_consultations=1520,
        consultation_fee=300,
        is_online=True,
    ),
    Doctor(
        id="doc2",
        name="Dr. Harpreet Singh",
        name_hi="डॉ. हरप्रीत सिंह",
        name_pa="ਡਾ. ਹਰਪ੍ਰੀਤ ਸਿੰਘ",
        specialty="Pediatrics",
        specialty_hi="बाल रोग",
        specialty_pa="ਬਾਲ ਰੋਗ",
        qualification="MBBS, DCH",
        experience_years=8,
        rating=4.6,
        total_consultations=980,
        consultation_fee=400,
        is_online=True,
    ),
    Doctor(
        id="doc3",
        name="Dr. Sunita Sharma",
        name_hi="डॉ. सुनीता शर्मा",
        name_pa="ਡਾ. ਸੁਨੀਤਾ ਸ਼ਰਮਾ",
        specialty="Gynecology",
        specialty_hi="स्त्री रोग",
        specialty_pa="ਇਸਤਰੀ ਰੋਗ",
        qualification="MBBS, MS (OBG)",
        experience_years=15,
        rating=4.9,
        total_consultations=2110,
        consultation_fee=500,
        is_online=False,
    ),
    Doctor(
        id="doc4",
        name="Dr. Gurdeep Gill",
        name_hi="डॉ. गुरदीप गिल",
        name_pa="ਡਾ. ਗੁਰਦੀਪ ਗਿੱਲ",
        specialty="Dermatology",
        specialty_hi="त्वचा रोग",
        specialty_pa="ਚਮੜੀ ਰੋਗ",
        qualification="MBBS, MD (Derm)",
        experience_years=6,
        rating=4.4,
        total_consultations=640,
        consultation_fee=350,
        is_online=True,
    ),
    Doctor(
        id="doc5",
        name="Dr. Rakesh Verma",
        name_hi="डॉ. राकेश वर्मा",
        name_pa="ਡਾ. ਰਾਕੇਸ਼ ਵਰਮਾ",
        specialty="Cardiology",
        specialty_hi="हृदय रोग",
        specialty_pa="ਦਿਲ ਦੇ ਰੋਗ",
        qualification="MBBS, MD, DM (Cardio)",
        experience_years=20,
        rating=4.7,
        total_consultations=3050,
        consultation_fee=700,
        is_online=False,
    ),
)


def localized_name(doctor: Doctor, locale: str) -> str:
    if locale == "hi":
        return doctor.name_hi or doctor.name
    if locale == "pa":
        return doctor.name_pa or doctor.name
    return doctor.name


def localized_specialty(doctor: Doctor, locale: str) -> str:
    if locale == "hi":
        return doctor.specialty_hi or doctor.specialty
    if locale == "pa":
        return doctor.specialty_pa or doctor.specialty
    return doctor.specialty
