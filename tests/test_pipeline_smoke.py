import os
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("RATE_LIMIT_ENABLED", "0")

import resume_ats.main  # noqa: F401,E402
from resume_ats.core.config.scoring import get_scoring_value  # noqa: E402
from resume_ats.scoring import compute_general_ats  # noqa: E402
from resume_ats.semantic import compute_match_ats  # noqa: E402


class PipelineSmokeTests(unittest.TestCase):
    def test_safe_imports_and_scoring_config_lookup(self):
        self.assertEqual(get_scoring_value("matching.blend.match"), 0.7)

    def test_general_and_match_results_serialize(self):
        general = compute_general_ats("Summary\n- Built APIs with Python and Docker.")
        match = compute_match_ats("Built APIs with Python.", "Python developer")
        self.assertIn('"score"', general.model_dump_json())
        self.assertIn('"match"', match.model_dump_json())


if __name__ == "__main__":
    unittest.main()
