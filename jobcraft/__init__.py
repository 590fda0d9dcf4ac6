"""
jobcraft: LLM-backed job application helpers.

The package exposes four stateless operations meant to be called from a
web back end on behalf of a signed-in user:

1. **analyze_job** – classify the poster (recruiter or employer) and
   summarise company, expectations, requirements and challenges.
2. **analyze_fit_for_job** – compare a resume with that analysis.
3. **generate_resume** – rewrite the resume for the job.
4. **generate_cover_letter** – write a matching cover letter.

Each operation checks the caller session (`auth`), renders a prompt
(`prompts`), makes a single call to an LLM provider (`providers`) and
returns the HTML the model produced.  Rendering and sanitising that HTML
is left to the caller.
"""

from .auth import LocalSession, require_session  # noqa: F401
from .config import Settings, load_settings  # noqa: F401
from .errors import (  # noqa: F401
    ExtractionError,
    JobcraftError,
    OperationError,
    ProviderError,
    Unauthorized,
)
from .operations import (  # noqa: F401
    analyze_fit_for_job,
    analyze_job,
    generate_cover_letter,
    generate_resume,
)

__version__ = "0.1.0"
