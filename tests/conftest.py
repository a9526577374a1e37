"""
Pytest configuration and fixtures
"""
import json

import pytest


@pytest.fixture
def llm_profile():
    """Loosely-shaped model output the way a chat model tends to return it."""
    return {
        "name": "Alice Example",
        "contact": {
            "email": "alice@example.com",
            "phone": "+1 555 0100",
            "location": "Berlin, Germany",
            "website": "https://www.linkedin.com/in/",
            "linkedin": "alice-example",
        },
        "summary": "Backend engineer focused on data platforms.",
        "experience": [
            {
                "position": "Senior Engineer",
                "company": "Acme",
                "tenure": "2020 - Present",
                "keyAchievements": ["Cut batch runtime by 40%", "Led SQL migration"],
            },
            {
                "title": "Engineer",
                "company": "Initech",
                "dates": "2016 - 2020",
            },
        ],
        "education": [
            {
                "degree": "BSc, Computer Science",
                "institution": "TU Berlin",
                "graduation_date": "2016",
            }
        ],
        "top_skills": ["Go", "SQL", "Kafka"],
        "projects": [{"name": "pipewire", "description": "Streaming ETL toolkit"}],
        "certifications": ["CKA", {"name": "AWS Solutions Architect", "year": 2021}],
        "languages": [
            "English (Native)",
            {"language": "German", "proficiency": "C1"},
            {"name": "French"},
        ],
    }


@pytest.fixture
def fenced_completion(llm_profile):
    """A chatty completion wrapping the payload in a ```json fence."""
    return (
        "Sure! Here is the structured resume:\n\n```json\n"
        + json.dumps(llm_profile, indent=2)
        + "\n```\nLet me know if you need anything else."
    )
