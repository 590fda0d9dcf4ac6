"""
Tailored resume and cover letter generation.

Both take the job analysis and fit analysis produced earlier in the
flow, plus the candidate's resume and any extra notes they typed in.
"""

from __future__ import annotations

from typing import Optional

from ..auth import require_session
from ..config import GENERATE_COVER_LETTER, GENERATE_RESUME, Settings
from ..prompts import build_cover_letter_prompt, build_resume_prompt
from ..providers import ProviderClient
from .runner import run_operation


def generate_resume(
    session: object,
    job_analysis: str,
    original_resume: str,
    additional_info: str,
    fit_analysis: str,
    *,
    client: Optional[ProviderClient] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Rewrite the resume for the analyzed job.

    The HTML uses ``<section data-section-id=...>`` blocks so the front end
    can edit and export sections individually.  Returns
    ``"Failed to generate resume"`` when the model returns nothing and
    raises ``OperationError`` with the same text on provider failure.
    """
    require_session(session)
    prompt = build_resume_prompt(job_analysis, original_resume, additional_info, fit_analysis)
    return run_operation(GENERATE_RESUME, prompt, client=client, settings=settings)


def generate_cover_letter(
    session: object,
    job_analysis: str,
    resume: str,
    additional_info: str,
    fit_analysis: str,
    *,
    client: Optional[ProviderClient] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Write a short (2-3 paragraph) HTML cover letter for the analyzed job."""
    require_session(session)
    prompt = build_cover_letter_prompt(job_analysis, resume, additional_info, fit_analysis)
    return run_operation(GENERATE_COVER_LETTER, prompt, client=client, settings=settings)
