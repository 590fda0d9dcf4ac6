"""
Job analysis and candidate-fit analysis.
"""

from __future__ import annotations

from typing import Optional

from ..auth import require_session
from ..config import ANALYZE_FIT, ANALYZE_JOB, Settings
from ..prompts import build_fit_analysis_prompt, build_job_analysis_prompt
from ..providers import ProviderClient
from .runner import run_operation


def analyze_job(
    session: object,
    website: Optional[str],
    description: str,
    *,
    client: Optional[ProviderClient] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Analyze a job posting and the company behind it.

    The model first decides whether the posting comes from a recruiter or
    from the employer, then fills in five HTML sections: posting type,
    company overview, key expectations, what they are looking for and key
    challenges.

    Args:
        session: Caller session; must be truthy.
        website: Company website or notes.  Optional.
        description: Job description text.
        client: Provider override; defaults to the Perplexity HTTP client.
        settings: Configuration override.

    Returns:
        The analysis HTML exactly as returned by the model.

    Raises:
        Unauthorized: Without a session, before any provider work.
        ProviderError: On HTTP failure; the message carries the response body.
        ExtractionError: If the response has no completion text.
    """
    require_session(session)
    prompt = build_job_analysis_prompt(website, description)
    return run_operation(ANALYZE_JOB, prompt, client=client, settings=settings)


def analyze_fit_for_job(
    session: object,
    job_analysis: str,
    resume: str,
    *,
    client: Optional[ProviderClient] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Evaluate how well a resume fits a previously analyzed job.

    Returns four HTML sections (overall assessment, matching skills, resume
    focus recommendations, potential gaps phrased as questions), or
    ``"No analysis generated"`` when the model returns nothing.  Provider
    failures raise ``OperationError("Failed to analyze fit")``.
    """
    require_session(session)
    prompt = build_fit_analysis_prompt(job_analysis, resume)
    return run_operation(ANALYZE_FIT, prompt, client=client, settings=settings)
