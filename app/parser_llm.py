"""
LLM-based résumé parser.

• Substitutes the profile text into a fixed prompt and hands it to an
  injected invoker (see llm_client.make_invoker), so any backend works.
• Pulls the JSON payload out of the free-text completion: a fenced block
  first, then the first-"{"-to-last-"}" span, else the whole reply.
• Normalises the parsed JSON (cleaner.normalize) and validates it
  against the Resume schema. Nothing is cached or retried.
"""

from __future__ import annotations
import json, logging, re, textwrap
from typing import Any, Callable

from cleaner import normalize
from errors import PayloadParseError, SchemaError
from schema_resume import Resume, validate

log = logging.getLogger(__name__)

FORMAT_INSTRUCTIONS = (
    "Return the resume data as a valid JSON object without any additional text or formatting."
)

_PROMPT_TEMPLATE = textwrap.dedent(
    """\
    You are an AI assistant that generates professional, ATS-friendly resumes based on LinkedIn profile information.
    Extract the most relevant information from the provided LinkedIn profile and create a structured resume. It must include a brief professional
    summary, experience, education, skills, projects, certifications, and languages.

    Use these keys: name, contact (email, phone, location, linkedin), summary,
    experience (title, company, dates, achievements), education (degree, institution, major, dates),
    skills, projects (name, description), certifications, languages (name, level).

    {format_instructions}

    LinkedIn Profile Information:
    {profile_info}

    Generate a structured resume based on the above information. Be sure to extract and include all relevant details, including the person's name, contact information, work experience, education, skills, projects, certifications, and languages. If any information is not available, leave it blank or omit it from the structure.
    """
)

_FENCED = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.S)


def render_prompt(profile_text: str) -> str:
    # str.replace, not str.format: profile text may contain braces
    return (_PROMPT_TEMPLATE
            .replace("{format_instructions}", FORMAT_INSTRUCTIONS)
            .replace("{profile_info}", profile_text))


def extract_payload(raw: str) -> str:
    """Best-effort location of the JSON object inside a completion.

    Assumes at most one object; several objects get merged into one span
    together with whatever prose sits between them.
    """
    if m := _FENCED.search(raw):
        return m.group(1).strip()

    start, end = raw.find("{"), raw.rfind("}")
    if start != -1 and end > start:
        return raw[start:end + 1]

    return raw


def parse_payload(payload: str) -> Any:
    try:
        return json.loads(payload)
    except json.JSONDecodeError as exc:
        log.error("Payload is not valid JSON: %s", exc)
        raise PayloadParseError(f"Error parsing resume data: {exc}", raw=payload) from exc


def resume_from_completion(completion: str) -> Resume:
    """completion ➜ payload ➜ JSON ➜ candidate ➜ Resume."""
    payload = extract_payload(completion)
    log.debug("Extracted payload: %s", payload)
    candidate = normalize(parse_payload(payload))
    try:
        return validate(candidate)
    except SchemaError as exc:
        exc.raw = payload
        raise


def parse_resume_llm(raw_text: str, invoke: Callable[[str], str]) -> Resume:
    completion = invoke(render_prompt(raw_text))
    log.debug("Raw completion: %s", completion)
    return resume_from_completion(completion)
