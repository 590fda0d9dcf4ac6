"""
Prompt construction for the four operations.

These are pure functions: caller text is interpolated verbatim into the
templates in :mod:`jobcraft.prompts.templates`.  No escaping or trimming
is applied because the prompt goes to a remote model, not to a browser.
Sanitising the HTML that comes back is the rendering layer's job.
"""

from __future__ import annotations

from typing import Optional

from .templates import (
    COVER_LETTER_TEMPLATE,
    FIT_ANALYSIS_TEMPLATE,
    JOB_ANALYSIS_TEMPLATE,
    RESUME_TEMPLATE,
    WEBSITE_PLACEHOLDER,
)


def build_job_analysis_prompt(website: Optional[str], description: str) -> str:
    """Render the job/company analysis prompt.

    Args:
        website: Company website or free-form company info.  ``None`` or an
            empty string renders as ``"Not provided"``.
        description: The job description text.

    Returns:
        The instruction text asking for the five-section analysis HTML.
    """
    return JOB_ANALYSIS_TEMPLATE.format(
        website=website or WEBSITE_PLACEHOLDER,
        description=description,
    )


def build_fit_analysis_prompt(job_analysis: str, resume: str) -> str:
    """Render the candidate-fit prompt from a prior job analysis and a resume."""
    return FIT_ANALYSIS_TEMPLATE.format(job_analysis=job_analysis, resume=resume)


def build_resume_prompt(
    job_analysis: str,
    original_resume: str,
    additional_info: str,
    fit_analysis: str,
) -> str:
    return RESUME_TEMPLATE.format(
        job_analysis=job_analysis,
        original_resume=original_resume,
        additional_info=additional_info,
        fit_analysis=fit_analysis,
    )


def build_cover_letter_prompt(
    job_analysis: str,
    resume: str,
    additional_info: str,
    fit_analysis: str,
) -> str:
    return COVER_LETTER_TEMPLATE.format(
        job_analysis=job_analysis,
        resume=resume,
        additional_info=additional_info,
        fit_analysis=fit_analysis,
    )
