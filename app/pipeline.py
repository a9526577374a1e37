"""
PDF ➜ Resume ➜ HTML in one synchronous pass.

Text extraction always completes before the model is called; either a
fully valid résumé comes back or a ResumeError subclass is raised.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from extractor import pdf_to_text
from generator_rule import render
from parser_llm import parse_resume_llm
from schema_resume import Resume

log = logging.getLogger(__name__)

# Stage names reported to the optional progress callback, in order
STAGES = ("extracting", "invoking", "rendering", "done")


@dataclass(frozen=True)
class GeneratedResume:
    resume: Resume
    html: str


def generate_resume(
    pdf: str | Path | bytes,
    invoke: Callable[[str], str],
    progress: Callable[[str], None] | None = None,
) -> GeneratedResume:
    def report(stage: str):
        if progress:
            progress(stage)

    report("extracting")
    text = pdf_to_text(pdf)

    report("invoking")
    resume = parse_resume_llm(text, invoke)

    report("rendering")
    html = render(resume)

    report("done")
    log.info("Rendered resume (%d bytes)", len(html))
    return GeneratedResume(resume=resume, html=html)
