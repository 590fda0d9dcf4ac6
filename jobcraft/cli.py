"""
Command line interface for jobcraft.

Lets an operator run any of the four operations against local text
files without the web application, e.g.::

    jobcraft analyze-job --description job.txt --website acme.com > analysis.html
    jobcraft analyze-fit --job-analysis analysis.html --resume resume.txt
    jobcraft generate-resume --job-analysis analysis.html --resume resume.txt \\
        --fit-analysis fit.html --additional-info notes.txt --out resume.html

The CLI acts as a trusted local caller, so it passes a
:class:`~jobcraft.auth.LocalSession` to the operations.  Credentials are
read from the environment (or ``.env``) as usual.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .auth import LocalSession
from .config import load_settings
from .errors import JobcraftError
from .operations import analyze_fit_for_job, analyze_job, generate_cover_letter, generate_resume

logger = logging.getLogger("jobcraft.cli")


def _read_text(path: Optional[str]) -> str:
    if not path:
        return ""
    return Path(path).read_text(encoding="utf-8")


def _write_output(html: str, out: Optional[str]) -> None:
    if out:
        Path(out).write_text(html, encoding="utf-8")
        logger.info("Wrote %d characters to %s", len(html), out)
    else:
        sys.stdout.write(html)
        if not html.endswith("\n"):
            sys.stdout.write("\n")


def cmd_analyze_job(args: argparse.Namespace) -> str:
    website = args.website or _read_text(args.website_file)
    return analyze_job(
        LocalSession(),
        website,
        _read_text(args.description),
        settings=load_settings(args.config),
    )


def cmd_analyze_fit(args: argparse.Namespace) -> str:
    return analyze_fit_for_job(
        LocalSession(),
        _read_text(args.job_analysis),
        _read_text(args.resume),
        settings=load_settings(args.config),
    )


def cmd_generate_resume(args: argparse.Namespace) -> str:
    return generate_resume(
        LocalSession(),
        _read_text(args.job_analysis),
        _read_text(args.resume),
        _read_text(args.additional_info),
        _read_text(args.fit_analysis),
        settings=load_settings(args.config),
    )


def cmd_generate_cover_letter(args: argparse.Namespace) -> str:
    return generate_cover_letter(
        LocalSession(),
        _read_text(args.job_analysis),
        _read_text(args.resume),
        _read_text(args.additional_info),
        _read_text(args.fit_analysis),
        settings=load_settings(args.config),
    )


def _add_generation_inputs(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--job-analysis", required=True, dest="job_analysis", help="Job analysis HTML file")
    cmd.add_argument("--resume", required=True, help="Resume text file")
    cmd.add_argument("--fit-analysis", required=True, dest="fit_analysis", help="Fit analysis HTML file")
    cmd.add_argument("--additional-info", dest="additional_info", help="Extra notes from the candidate")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jobcraft", description="LLM job application helpers")
    parser.add_argument("--config", help="YAML file with per-operation model overrides")
    parser.add_argument("--out", help="Write the HTML result here instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    job_cmd = subparsers.add_parser("analyze-job", help="Analyze a job posting")
    job_cmd.add_argument("--description", required=True, help="Job description text file")
    website_group = job_cmd.add_mutually_exclusive_group()
    website_group.add_argument("--website", help="Company website or short company info")
    website_group.add_argument("--website-file", dest="website_file", help="File with company info")
    job_cmd.set_defaults(func=cmd_analyze_job)

    fit_cmd = subparsers.add_parser("analyze-fit", help="Evaluate resume fit for an analyzed job")
    fit_cmd.add_argument("--job-analysis", required=True, dest="job_analysis", help="Job analysis HTML file")
    fit_cmd.add_argument("--resume", required=True, help="Resume text file")
    fit_cmd.set_defaults(func=cmd_analyze_fit)

    resume_cmd = subparsers.add_parser("generate-resume", help="Generate a tailored resume")
    _add_generation_inputs(resume_cmd)
    resume_cmd.set_defaults(func=cmd_generate_resume)

    letter_cmd = subparsers.add_parser("generate-cover-letter", help="Generate a cover letter")
    _add_generation_inputs(letter_cmd)
    letter_cmd.set_defaults(func=cmd_generate_cover_letter)
    return parser


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    try:
        html = args.func(args)
    except JobcraftError as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 2
    _write_output(html, args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
