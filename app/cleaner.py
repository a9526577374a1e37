"""
Schema normalisation.

LLMs rarely agree on key names, so each canonical field is filled from an
ordered list of candidate keys (first present one wins). A key is *present*
when its value is neither None nor an empty string; an empty list counts.

    contactInfo                 contact, contactInfo  (first non-empty object)
    contactInfo.linkedin        contact.website + contact.linkedin
    experience[].title          title, position
    experience[].dates          dates, tenure
    experience[].achievements   achievements, keyAchievements  (else [])
    education[].major           major, field  (else 2nd comma segment of degree)
    education[].dates           dates, graduation_date
    skills                      skills, top_skills  (else [])

Nothing here raises: missing or oddly-typed containers degrade to empty or
absent fields, and type problems are left for the validator to report.
"""
from __future__ import annotations
from typing import Any, Dict, List

# ───────────────────────────────────────── fallback tables ──
CONTACT_KEYS = ("contact", "contactInfo")

CONTACT_FIELDS: Dict[str, tuple[str, ...]] = {
    "email":    ("email",),
    "phone":    ("phone",),
    "location": ("location",),
}

EXPERIENCE_FIELDS: Dict[str, tuple[str, ...]] = {
    "title":   ("title", "position"),
    "company": ("company",),
    "dates":   ("dates", "tenure"),
}
ACHIEVEMENT_KEYS = ("achievements", "keyAchievements")

EDUCATION_FIELDS: Dict[str, tuple[str, ...]] = {
    "degree":      ("degree",),
    "institution": ("institution",),
    "major":       ("major", "field"),
    "dates":       ("dates", "graduation_date"),
}

SKILL_KEYS = ("skills", "top_skills")
LANGUAGE_NAME_KEYS = ("name", "language")
LANGUAGE_LEVEL_KEYS = ("level", "proficiency")

# what a missing part of a formatted language looks like
_MISSING = "undefined"


# ───────────────────────────────────────── helpers ──
def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _present(value: Any) -> bool:
    return value is not None and value != ""


def first_present(obj: Dict[str, Any], keys: tuple[str, ...]) -> Any:
    """Value of the first candidate key that is present, else None."""
    for key in keys:
        if _present(obj.get(key)):
            return obj[key]
    return None


def _first_contact(r: Dict[str, Any]) -> Dict[str, Any]:
    # an empty object does not hide a filled-in one under the other key
    for key in CONTACT_KEYS:
        if isinstance(r.get(key), dict) and r[key]:
            return r[key]
    return {}


def _pick(obj: Dict[str, Any], table: Dict[str, tuple[str, ...]]) -> Dict[str, Any]:
    out = {}
    for field, keys in table.items():
        value = first_present(obj, keys)
        if value is not None:
            out[field] = value
    return out


def _major_from_degree(degree: Any) -> str | None:
    # "BSc, Computer Science" -> "Computer Science"
    if not isinstance(degree, str):
        return None
    parts = degree.split(",")
    if len(parts) < 2:
        return None
    return parts[1].strip() or None


# ───────────────────────────────────────── sections ──
def normalise_contact(contact: Any) -> Dict[str, Any]:
    c = _as_dict(contact)
    out = _pick(c, CONTACT_FIELDS)
    parts = [c.get("website"), c.get("linkedin")]
    odd = [p for p in parts if _present(p) and not isinstance(p, str)]
    # a non-string part goes through as-is for the validator to reject
    out["linkedin"] = odd[0] if odd else "".join(p for p in parts if _present(p))
    return out


def normalise_experience(item: Any) -> Dict[str, Any]:
    exp = _as_dict(item)
    out = _pick(exp, EXPERIENCE_FIELDS)
    achievements = first_present(exp, ACHIEVEMENT_KEYS)
    out["achievements"] = achievements if achievements is not None else []
    return out


def normalise_education(item: Any) -> Dict[str, Any]:
    edu = _as_dict(item)
    out = _pick(edu, EDUCATION_FIELDS)
    if "major" not in out:
        major = _major_from_degree(edu.get("degree"))
        if major:
            out["major"] = major
    return out


def normalise_certification(cert: Any) -> Any:
    """Plain string stays, {"name": ...} collapses to its name.

    Anything else is returned untouched so validation can point at it.
    """
    if isinstance(cert, str):
        return cert
    if isinstance(cert, dict) and isinstance(cert.get("name"), str):
        return cert["name"]
    return cert


def format_language(lang: Any) -> Any:
    if isinstance(lang, str):
        return lang
    if not isinstance(lang, dict):
        return lang
    name = first_present(lang, LANGUAGE_NAME_KEYS)
    level = first_present(lang, LANGUAGE_LEVEL_KEYS)
    return f"{_MISSING if name is None else name} ({_MISSING if level is None else level})"


def _keep_language(entry: Any) -> bool:
    if not isinstance(entry, str):
        return True     # left for the validator
    return not (entry.startswith(_MISSING) or entry.endswith(f"({_MISSING})"))


def normalise_languages(languages: Any) -> List[Any]:
    formatted = [format_language(lang) for lang in _as_list(languages)]
    return [entry for entry in formatted if _keep_language(entry)]


# ───────────────────────────────────────── normaliser ──
def normalize(parsed: Any) -> Dict[str, Any]:
    """Map loosely-shaped model output onto the Resume candidate shape."""
    r = _as_dict(parsed)
    out: Dict[str, Any] = {}

    if _present(r.get("name")):
        out["name"] = r["name"]
    out["contactInfo"] = normalise_contact(_first_contact(r))
    if _present(r.get("summary")):
        out["summary"] = r["summary"]

    out["experience"] = [normalise_experience(j) for j in _as_list(r.get("experience"))]
    out["education"] = [normalise_education(e) for e in _as_list(r.get("education"))]

    skills = first_present(r, SKILL_KEYS)
    out["skills"] = skills if skills is not None else []

    out["projects"] = [dict(p) if isinstance(p, dict) else p
                       for p in _as_list(r.get("projects"))]
    out["certifications"] = [normalise_certification(c)
                             for c in _as_list(r.get("certifications"))]
    out["languages"] = normalise_languages(r.get("languages"))
    return out
