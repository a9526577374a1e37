import copy

import pytest

from cleaner import first_present, format_language, normalize

EMPTY_CANDIDATE = {
    "contactInfo": {"linkedin": ""},
    "experience": [],
    "education": [],
    "skills": [],
    "projects": [],
    "certifications": [],
    "languages": [],
}


@pytest.mark.parametrize("parsed", [{}, None, [], "just text", 42])
def test_normalize_degrades_to_empty_candidate(parsed):
    assert normalize(parsed) == EMPTY_CANDIDATE


def test_normalize_does_not_mutate_input(llm_profile):
    before = copy.deepcopy(llm_profile)
    normalize(llm_profile)
    assert llm_profile == before


# Test first_present
@pytest.mark.parametrize("obj, expected", [
    ({"title": "Dev", "position": "Eng"}, "Dev"),
    ({"position": "Eng"}, "Eng"),
    ({"title": "", "position": "Eng"}, "Eng"),
    ({"title": None, "position": "Eng"}, "Eng"),
    ({}, None),
])
def test_first_present(obj, expected):
    assert first_present(obj, ("title", "position")) == expected


def test_first_present_empty_list_counts():
    assert first_present({"a": [], "b": ["x"]}, ("a", "b")) == []


# Test contact
def test_linkedin_concatenates_website_and_handle():
    out = normalize({"contact": {"website": "https://li/", "linkedin": "alice"}})
    assert out["contactInfo"]["linkedin"] == "https://li/alice"


@pytest.mark.parametrize("contact, expected", [
    ({"linkedin": "https://linkedin.com/in/bob"}, "https://linkedin.com/in/bob"),
    ({"website": "https://bob.dev"}, "https://bob.dev"),
    ({"website": None, "linkedin": None}, ""),
    ({}, ""),
    ("not an object", ""),
])
def test_linkedin_missing_parts_are_empty(contact, expected):
    assert normalize({"contact": contact})["contactInfo"]["linkedin"] == expected


def test_contact_fields_and_absent_ones_omitted():
    out = normalize({"contact": {"email": "a@b.c", "phone": ""}})
    assert out["contactInfo"] == {"email": "a@b.c", "linkedin": ""}


def test_contact_info_key_is_accepted():
    out = normalize({"contactInfo": {"location": "Oslo"}})
    assert out["contactInfo"]["location"] == "Oslo"


# Test experience
def test_experience_fallbacks(llm_profile):
    out = normalize(llm_profile)
    assert out["experience"] == [
        {
            "title": "Senior Engineer",
            "company": "Acme",
            "dates": "2020 - Present",
            "achievements": ["Cut batch runtime by 40%", "Led SQL migration"],
        },
        {
            "title": "Engineer",
            "company": "Initech",
            "dates": "2016 - 2020",
            "achievements": [],
        },
    ]


def test_experience_non_object_item():
    assert normalize({"experience": ["Acme 2020"]})["experience"] == [{"achievements": []}]


def test_experience_empty_achievements_win_over_key_achievements():
    out = normalize({"experience": [{"achievements": [], "keyAchievements": ["x"]}]})
    assert out["experience"][0]["achievements"] == []


# Test education
@pytest.mark.parametrize("edu, major", [
    ({"degree": "BSc", "major": "Physics"}, "Physics"),
    ({"degree": "BSc", "field": "Maths"}, "Maths"),
    ({"degree": "BSc, Computer Science"}, "Computer Science"),
    ({"degree": "MSc, Data Science, Distinction"}, "Data Science"),
])
def test_education_major_fallbacks(edu, major):
    assert normalize({"education": [edu]})["education"][0]["major"] == major


@pytest.mark.parametrize("edu", [{"degree": "BSc"}, {"degree": "BSc, "}, {"degree": 3}, {}])
def test_education_major_absent(edu):
    assert "major" not in normalize({"education": [edu]})["education"][0]


def test_education_dates_fallback(llm_profile):
    edu = normalize(llm_profile)["education"][0]
    assert edu == {
        "degree": "BSc, Computer Science",
        "institution": "TU Berlin",
        "major": "Computer Science",
        "dates": "2016",
    }


# Test skills
@pytest.mark.parametrize("parsed, skills", [
    ({"skills": ["Go"], "top_skills": ["Rust"]}, ["Go"]),
    ({"top_skills": ["Rust"]}, ["Rust"]),
    ({"skills": None, "top_skills": ["Rust"]}, ["Rust"]),
    ({}, []),
])
def test_skills_fallback(parsed, skills):
    assert normalize(parsed)["skills"] == skills


# Test certifications
def test_certifications_reduced_to_strings(llm_profile):
    assert normalize(llm_profile)["certifications"] == ["CKA", "AWS Solutions Architect"]


def test_unresolvable_certification_left_for_validation():
    out = normalize({"certifications": [{"issuer": "AWS"}]})
    assert out["certifications"] == [{"issuer": "AWS"}]


# Test languages
@pytest.mark.parametrize("lang, expected", [
    ("Spanish", "Spanish"),
    ({"name": "German", "level": "C1"}, "German (C1)"),
    ({"language": "Polish", "proficiency": "Native"}, "Polish (Native)"),
    ({"name": "French"}, "French (undefined)"),
    ({"level": "B2"}, "undefined (B2)"),
])
def test_format_language(lang, expected):
    assert format_language(lang) == expected


def test_languages_drop_undefined_entries():
    out = normalize({"languages": [
        "English",
        {"name": "French"},
        {"level": "B2"},
        {},
        {"name": "German", "proficiency": "C1"},
    ]})
    assert out["languages"] == ["English", "German (C1)"]


def test_language_without_level_is_dropped():
    assert normalize({"languages": [{"name": "French"}]})["languages"] == []


def test_projects_passed_through(llm_profile):
    assert normalize(llm_profile)["projects"] == [
        {"name": "pipewire", "description": "Streaming ETL toolkit"}
    ]


@pytest.mark.parametrize("contact, raw", [
    ({"linkedin": 12345}, 12345),
    ({"website": {"url": "https://x"}, "linkedin": "alice"}, {"url": "https://x"}),
])
def test_non_string_linkedin_parts_are_not_stringified(contact, raw):
    assert normalize({"contact": contact})["contactInfo"]["linkedin"] == raw


def test_empty_contact_does_not_hide_contact_info():
    out = normalize({"contact": {}, "contactInfo": {"email": "a@b.c"}})
    assert out["contactInfo"] == {"email": "a@b.c", "linkedin": ""}
