"""
Prompt templates and builders.

Each operation has one hand-written template with an embedded HTML
schema for the model to fill in.  The builders only interpolate caller
text into those templates.
"""

from .builder import (  # noqa: F401
    build_cover_letter_prompt,
    build_fit_analysis_prompt,
    build_job_analysis_prompt,
    build_resume_prompt,
)
from .templates import JOB_ANALYSIS_SYSTEM_PROMPT, WEBSITE_PLACEHOLDER  # noqa: F401
