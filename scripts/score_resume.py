from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.scoring import AnalysisProfile, compute_general_ats  # noqa: E402
from resume_ats.semantic import compute_match_ats  # noqa: E402


def _read_text(path: str) -> str:
    return Path(path).read_text(encoding="utf-8", errors="ignore")


def main() -> None:
    parser = argparse.ArgumentParser(description="Score an extracted plain-text resume.")
    parser.add_argument("resume", help="Path to the resume as UTF-8 text")
    parser.add_argument("--jd", default=None, help="Path to a job description; switches to match scoring")
    parser.add_argument("--career-level", default="entry", help="entry, mid or senior")
    parser.add_argument("--role", default="", help="Role code such as SWE, DATA or PM")
    parser.add_argument("--out", default=None, help="Write JSON here instead of stdout")
    args = parser.parse_args()

    profile = AnalysisProfile(career_level=args.career_level, role=args.role)
    resume_text = _read_text(args.resume)
    if args.jd:
        result = compute_match_ats(resume_text, _read_text(args.jd), profile)
    else:
        result = compute_general_ats(resume_text, profile)

    payload = json.dumps(result.model_dump(), indent=2, ensure_ascii=False)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(payload + "\n", encoding="utf-8")
    else:
        print(payload)


if __name__ == "__main__":
    main()
