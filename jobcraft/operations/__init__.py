"""
The four public operations.

Each one runs the same straight line: check the session, render the
prompt, call one provider once, return the completion text.
"""

from .analyze import analyze_fit_for_job, analyze_job  # noqa: F401
from .generate import generate_cover_letter, generate_resume  # noqa: F401
from .runner import build_request, run_operation  # noqa: F401
