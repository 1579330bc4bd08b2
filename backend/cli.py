"""
Command line entry point: rank a candidate file and print the shortlist as JSON.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from config import Config, load_config
from scorer.llm import build_generator
from scorer.ranker import CandidateRanker, NoCandidatesError
from scorer.signals import to_dicts
from sources import get_source

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="candidate-ranker",
        description="Rank candidate records into a scored, tagged shortlist.",
    )
    parser.add_argument("input", help="Candidate JSON file or http(s) URL")
    jd = parser.add_mutually_exclusive_group()
    jd.add_argument("--job-description", default="", help="Job description text")
    jd.add_argument("--job-description-file", help="File containing the job description")
    parser.add_argument("--industry", help="Industry key (default: auto-detect)")
    parser.add_argument("--required-experience", type=float, default=0, help="Minimum years of experience")
    parser.add_argument(
        "--required-skill", action="append", default=[], dest="required_skills",
        help="Required skill (repeatable)",
    )
    parser.add_argument("--config", help="Path to config YAML")
    parser.add_argument("--enhance", action="store_true", help="Rewrite top summaries with the text generator")
    parser.add_argument("--output", help="Write JSON here instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    config = load_config(args.config) if args.config else Config()
    if args.enhance:
        config.enhancement.enabled = True

    job_description = args.job_description
    if args.job_description_file:
        with open(args.job_description_file, 'r', encoding='utf-8') as f:
            job_description = f.read()

    candidates = get_source(args.input).fetch_candidates()
    ranker = CandidateRanker(config=config, generator=build_generator(config.enhancement))
    options = {
        "job_description": job_description,
        "industry": args.industry,
        "required_experience": args.required_experience,
        "required_skills": args.required_skills,
    }

    try:
        ranked = ranker.rank(candidates, options)
    except NoCandidatesError as e:
        logger.error(str(e))
        return 1

    output = json.dumps(to_dicts(ranked), indent=2, ensure_ascii=False)
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output + "\n")
        logger.info(f"Wrote {len(ranked)} ranked candidates to {args.output}")
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
